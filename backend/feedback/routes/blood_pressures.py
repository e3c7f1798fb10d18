"""
Feedback Tracker Backend — Blood Pressure Routes
=================================================

What:  /api/blood-pressures, served by the generic CrudResource.
Who:   Called by the web client's blood pressure pages and charts.
"""

from feedback.descriptors import BLOOD_PRESSURE
from feedback.routes.resource import CrudResource
from feedback.services import blood_pressure_service

resource = CrudResource(BLOOD_PRESSURE, blood_pressure_service, tag="Blood Pressure")
router = resource.build_router()
