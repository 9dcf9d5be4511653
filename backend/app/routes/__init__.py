# Routes package init
"""
Community Board Backend — API Routes Package
==============================================

Route Inventory:
    - users.py:     GET/POST /users, GET/PUT/DELETE /users/{id}
    - boards.py:    GET/POST /boards, GET/PUT/DELETE /boards/{id}
    - comments.py:  GET/POST /comments, GET/DELETE /comments/{id}
    - health.py:    GET /health

Design Principle:
    Routes are THIN: they handle HTTP concerns only:
    - Extract path parameters and the JSON body
    - Call the appropriate service
    - Pick the status code and headers

    Business logic belongs in services, not routes.
"""
