"""
Resource API - Services Layer
===============================

What:  Business logic between routes (HTTP) and the database.
How:   Each service method runs one statement on the session it is given
       and returns pydantic row models. Database failures are translated
       into application exceptions by `translate_db_errors`.

Service Inventory:
    - ResourceService:  list, fetch one, create
    - UserService:      list
    - CommentService:   list per resource, create
    - LikeService:      counts per resource, one user's state, upsert
    - ToDoService:      list per user (joined with resources), add, delete
    - ResourceNotifier: Discord webhook message on resource creation
"""
