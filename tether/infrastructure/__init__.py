"""Infrastructure layer for tether.

The infrastructure layer contains implementations of domain interfaces:
- State machines (the connection supervisor)
- Scheduling (asyncio timers, single-slot timer holders)
- Event plumbing (observer registry)
- Transport implementations (WebSocket client)

This layer depends on:
- Domain layer (interfaces and value objects)
- External libraries (websockets)

But domain layer does NOT depend on infrastructure.
"""
