"""Cache keys for catalog responses."""

EXPERIENCE_LIST_KEY = "experiences:list"


def experience_detail_key(experience_id: str) -> str:
    return f"experiences:{experience_id}"
