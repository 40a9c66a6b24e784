"""
Signal handlers that revalidate frontend pages when catalog content changes.

One post_save and one post_delete receiver is connected per model listed in
REVALIDATION_TRACKED_MODELS. Delivery runs once the write has committed, and
a failed notification is only logged, so it never rolls back the write that
triggered it.
"""

import logging
from typing import Any, Dict, Optional

from django.apps import apps
from django.conf import settings
from django.db import transaction
from django.db.models.signals import post_delete, post_save

from .paths import entity_field
from .service import get_revalidation_service

logger = logging.getLogger(__name__)


def get_tracked_models() -> Dict[str, str]:
    """Model label -> content type, e.g. {'catalog.Product': 'product'}."""
    return dict(getattr(settings, 'REVALIDATION_TRACKED_MODELS', {}))


def _content_type_for(sender) -> Optional[str]:
    return get_tracked_models().get(sender._meta.label)


def _snapshot(instance) -> Dict[str, Any]:
    # Delete clears the pk once the transaction is done
    return {
        'id': instance.pk,
        'slug': entity_field(instance, 'slug'),
        'locale': entity_field(instance, 'locale'),
    }


def _notify(sender, instance, event: str) -> None:
    """Schedule revalidation once the write is committed."""
    try:
        entity_type = _content_type_for(sender)
        if not entity_type:
            return
        entity = _snapshot(instance)
        logger.debug(f"[Revalidation] {event} {entity_type} {entity['id']}")
        transaction.on_commit(
            lambda: get_revalidation_service().revalidate_entity(entity_type, entity),
            using=instance._state.db,
            robust=True,
        )
    except Exception as e:
        logger.error(f"[Revalidation] Error handling {event} of {sender.__name__}: {str(e)}")


def handle_save(sender, instance, created=False, raw=False, **kwargs):
    """Revalidate after an entity is created or updated."""
    if raw:
        # Fixture loading
        return
    _notify(sender, instance, 'create' if created else 'update')


def handle_delete(sender, instance, **kwargs):
    """Revalidate after an entity is deleted, using its last known state."""
    _notify(sender, instance, 'delete')


def connect():
    """Connect revalidation signals. Called from AppConfig.ready()."""
    connected = 0
    for label in get_tracked_models():
        try:
            model = apps.get_model(label)
        except LookupError:
            logger.warning(f"[Revalidation] Tracked model {label} is not installed, skipping")
            continue

        uid = f"revalidate_{label}"
        post_save.connect(handle_save, sender=model, dispatch_uid=f"{uid}_save")
        post_delete.connect(handle_delete, sender=model, dispatch_uid=f"{uid}_delete")
        connected += 1

    logger.info(f"[Revalidation] ISR lifecycle hooks registered for {connected} models")
