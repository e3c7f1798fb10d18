"""/api/weights, served by the generic CrudResource."""

from feedback.descriptors import WEIGHT
from feedback.routes.resource import CrudResource
from feedback.services import weight_service

resource = CrudResource(WEIGHT, weight_service, tag="Weight")
router = resource.build_router()
