"""Job repository — the in-memory job store.

Sorting and paging come from BaseRepository.list; nothing outside this layer
sorts or slices the collection.
"""


from app.domain.job import JUST_POSTED, Job
from app.repositories.base import BaseRepository


class JobRepository(BaseRepository[Job]):
    model = Job

    def create(self, **kwargs) -> Job:
        # `posted` is system-managed
        kwargs["posted"] = JUST_POSTED
        return super().create(**kwargs)

    def update(self, entity_id: int, **kwargs) -> Job | None:
        kwargs.pop("posted", None)
        return super().update(entity_id, **kwargs)
