# Services package init
"""
MiniCRM Backend — Services Layer
==================================

What:  Data-mapping layer sitting between routes (HTTP) and the database.
How:   Each service turns one API operation into one SQL statement and the
       result into a Pydantic model. Services are stateless singletons and
       receive the request's AsyncSession on every call.

Service Inventory:
    - CompanyService:   list / get / create / update / delete companies
    - ContactService:   list / get (with activities) / create / update / delete contacts
    - ActivityService:  list activities of a contact / create activity
    - DealService:      list / create / update deals
    - DashboardService: aggregate counts and open pipeline value
"""
