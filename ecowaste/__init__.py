"""EcoWaste.

Backend for a consumer-facing waste-management application. Users log waste
entries, schedule pickups, file community reports, join cleanup events, take
AI-generated quizzes, and earn or redeem EcoPoints.

Core subpackages
----------------

- ``ecowaste.core``:

  - ``database``: SQLModel entities, per-table repositories and session
    management.
  - ``storage``: ``DatabaseStorage``, the typed facade every endpoint goes
    through. It owns the points accounting rules (earning on waste entries,
    spending on reward redemption) and the idempotent event join.
  - Logging, monitoring and the domain error hierarchy.

- ``ecowaste.learning``:

  - Quiz generation through Pydantic AI and server-side quiz scoring.

- ``ecowaste.server``:

  - The FastAPI application and its ``/api`` routers.

Points accounting
-----------------

Every multi-step mutation (logging waste, redeeming a reward, joining an
event, adding challenge progress) runs in a single transaction and adjusts
counters with SQL increment expressions or conditional updates, so concurrent
requests cannot overdraw a balance or overfill an event.
"""

__version__ = "0.1.0"
