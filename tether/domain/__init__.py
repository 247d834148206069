"""Domain layer for tether.

This layer contains:
- Interfaces: contracts for sockets, operators, schedulers and commands
- Value Objects: connection states, options, events, pending exchanges
- Exceptions: the few errors surfaced to callers

The domain layer has ZERO dependencies on external libraries (except Python stdlib).
All external dependencies are abstracted behind interfaces.
"""
