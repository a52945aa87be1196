"""
Resource API - Routes Package
===============================

Route Inventory:
    - health.py:     GET  /                                 (greeting)
                     GET  /health                           (dependency status)
    - resources.py:  GET  /resources                        (newest first)
                     GET  /resources/{resourceID}
                     POST /resources                        (+ webhook notification)
    - users.py:      GET  /users
    - comments.py:   GET  /resources/{resourceID}/comments
                     POST /comments/{resourceID}
    - likes.py:      GET  /resources/{resourceID}/likes
                     GET  /resources/{resourceID}/likes/{userID}
                     POST /resources/{resourceID}/likes     (upsert)
    - todo.py:       GET    /to-do-list/{userID}
                     POST   /to-do-list
                     DELETE /to-do-list/{listID}

Routes stay thin: read path/body, call one service method, return rows or a
plain-text confirmation. Errors propagate to the global handlers in main.py,
so every request ends with a response.
"""
