# Routes package init
"""
School Records API: Routes Package
====================================

Route Inventory:
    - schools.py:   GET/POST /schools, GET/PUT/DELETE /schools/{id}
    - classes.py:   GET/POST /classes, GET/PUT/DELETE /classes/{id}
    - students.py:  GET/POST /students, GET/PUT/DELETE /students/{id}
    - health.py:    GET /health

Routes stay THIN: decode the request, call one service method, build the
response model. Errors are raised, never formatted here; the handlers in
main.py turn them into JSON.
"""
