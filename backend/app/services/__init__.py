# Services package init
"""
Community Board Backend — Services Layer
==========================================

What:  Business logic layer sitting between routes (HTTP) and repositories.
How:   Each service looks up the entities a request refers to, applies the
       schema mapper, calls the repository and shapes the response.

Service Inventory:
    - UserService:    list / get / create / update / delete users
    - BoardService:   same for boards; create requires an existing author
    - CommentService: list / get / create / delete; create requires an
                      existing author and board (author checked first)

Services are stateless singletons. They receive the request's AsyncSession
on every call and never commit; the session dependency owns the transaction.
"""
