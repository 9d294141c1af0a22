from abc import ABC, abstractmethod

from jobdash.models import Job


class JobSearchBase(ABC):
    @abstractmethod
    def search(
        self,
        query: str,
        location: str = "",
        employment_type: str = "",
        page: int = 1,
    ) -> list[Job]:
        pass
