from marketplace.stores.interfaces import BookingStore, ExperienceStore, PromoCodeStore

__all__ = ["BookingStore", "ExperienceStore", "PromoCodeStore"]
