"""
Feedback Tracker Backend — API Routes Package
==============================================

Route Inventory:
    - blood_pressures.py:  /api/blood-pressures[/{id}]
    - points.py:           /api/points[/{id}]   (role-scoped)
    - weights.py:          /api/weights[/{id}]
    - health.py:           GET /health

The entity routes are thin instances of resource.CrudResource; business
rules live in the services, policy differences in CrudResource hooks.
"""
