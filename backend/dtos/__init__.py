"""
Data Transfer Objects (DTOs) Layer

DTOs keep the business_cards table out of the HTTP contract: the API speaks
in these shapes and the mapper converts them to and from the entity.

Structure:
- request/: shapes bound from incoming requests (create, remove)
- response/: shapes returned to clients (interchange record, result wrapper)
- internal/: shapes passed between services and routers (exported files)
"""
