"""
Feedback Tracker Backend — Alert Headers
=========================================

What:  Builds the advisory headers that accompany every write.
Why:   The web client shows a toast for creations, updates and deletions,
       and a translated error for rejected requests, by reading these
       headers rather than the body (which may be empty).

Headers (prefix comes from settings.app_name):
    success:  X-feedbackApp-alert  + X-feedbackApp-params
    failure:  X-feedbackApp-error  + X-feedbackApp-params
"""

from typing import Any, Dict

from feedback.config import settings


def alert(message: str, param: str) -> Dict[str, str]:
    return {
        f"X-{settings.app_name}-alert": message,
        f"X-{settings.app_name}-params": param,
    }


def entity_creation_alert(entity_name: str, id: Any) -> Dict[str, str]:
    return alert(f"A new {entity_name} is created with identifier {id}", str(id))


def entity_update_alert(entity_name: str, id: Any) -> Dict[str, str]:
    return alert(f"A {entity_name} is updated with identifier {id}", str(id))


def entity_deletion_alert(entity_name: str, id: Any) -> Dict[str, str]:
    return alert(f"A {entity_name} is deleted with identifier {id}", str(id))


def failure_alert(entity_name: str, error_key: str) -> Dict[str, str]:
    return {
        f"X-{settings.app_name}-error": f"error.{error_key}",
        f"X-{settings.app_name}-params": entity_name,
    }
