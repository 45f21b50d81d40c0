# Routes package init
"""
MiniCRM Backend — API Routes Package
======================================

What:  HTTP route handlers: match (method, path), call one service method,
       return its model with the right status code.

Route Inventory:
    - companies.py:   GET/POST /api/companies, GET/PUT/DELETE /api/companies/{id}
    - contacts.py:    GET/POST /api/contacts, GET/PUT/DELETE /api/contacts/{id}
    - activities.py:  GET /api/contacts/{id}/activities, POST /api/activities
    - deals.py:       GET/POST /api/deals, PUT /api/deals/{id}
    - dashboard.py:   GET /api/dashboard

Ids use Starlette's `int` path convertor, which only matches `[0-9]+`:
`/api/companies/abc` or `/api/companies/-1` match no route and answer 404
"Not found". Any other method or path is also 404 (see main.py).
"""
