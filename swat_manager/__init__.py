"""SWAT Manager.

Backend service for a SWAT team management platform. Agencies track their
personnel, equipment, trainings, missions and schedules, and answer a fixed
questionnaire that drives two products:

- **Tier Assessment**: classifies the team's capability from Tier 1 (most
  capable) to Tier 4 based on answers to tier-impacting questions.
- **Gap Analysis**: a policy and procedure maturity report, independent of the
  tier classification.

Subpackages
-----------

- ``swat_manager.core``: persistence (entities, repositories, sessions),
  domain enums and I/O schemas, security primitives, logging, monitoring and
  the declarative seed.
- ``swat_manager.server``: the FastAPI application, its routers, services,
  middleware and exception handlers.
"""

__version__ = "0.1.0"
