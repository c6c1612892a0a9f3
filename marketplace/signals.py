"""Django signals for catalog cache invalidation."""

import logging

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from marketplace.cache_keys import EXPERIENCE_LIST_KEY, experience_detail_key
from marketplace.models import Experience, TimeSlot

logger = logging.getLogger(__name__)


def _invalidate_experience(experience_id) -> None:
    cache.delete_many([EXPERIENCE_LIST_KEY, experience_detail_key(str(experience_id))])
    logger.debug("Invalidated catalog cache for experience %s", experience_id)


@receiver([post_save, post_delete], sender=Experience)
def invalidate_experience_cache(sender, instance, **kwargs):
    """Invalidate caches when an experience is saved or deleted."""
    _invalidate_experience(instance.pk)


@receiver([post_save, post_delete], sender=TimeSlot)
def invalidate_time_slot_cache(sender, instance, **kwargs):
    """Invalidate caches when a time slot is saved or deleted."""
    _invalidate_experience(instance.experience_id)
