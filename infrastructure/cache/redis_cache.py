import json
from datetime import datetime, timedelta

from redis import asyncio as redis

from domain.exceptions.currency import CacheError
from domain.models.currency import UserPreference


class RedisCacheService:
    def __init__(self, redis_client: redis.Redis, preference_ttl: timedelta = timedelta(hours=24)):
        self.redis = redis_client
        self.preference_ttl = preference_ttl

    def _make_preference_key(self, user_id: str) -> str:
        return f"preference:{user_id}"

    async def get_preference(self, user_id: str) -> UserPreference | None:
        key = self._make_preference_key(user_id)
        data = await self.redis.get(key)

        if not data:
            return None

        try:
            pref_dict = json.loads(data)
            return UserPreference(
                user_id=pref_dict["user_id"],
                preferred_currency=pref_dict["preferred_currency"],
                updated_at=datetime.fromisoformat(pref_dict["updated_at"])
                if pref_dict.get("updated_at")
                else None,
            )
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise CacheError(f"Invalid json data for {key}: {e}") from e

    async def set_preference(self, preference: UserPreference) -> None:
        key = self._make_preference_key(preference.user_id)

        pref_dict = {
            "user_id": preference.user_id,
            "preferred_currency": preference.preferred_currency,
            "updated_at": preference.updated_at.isoformat() if preference.updated_at else None,
        }

        await self.redis.setex(key, self.preference_ttl, json.dumps(pref_dict))

    async def delete_preference(self, user_id: str) -> None:
        await self.redis.delete(self._make_preference_key(user_id))
