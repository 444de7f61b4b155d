from application.dtos.want_dtos import WantResponse
from application.mappers.want_mappers import WantMapper
from application.ports.repositories.want_repository import WantRepository


class GetWantByIdQuery:
    def __init__(self, want_repository: WantRepository) -> None:
        self.want_repository = want_repository

    async def execute(self, want_id: str) -> WantResponse | None:
        """Return the Want, or ``None`` when it does not exist.

        Absence is not an error here; callers decide what it means.
        """
        want = await self.want_repository.get(want_id)
        if want is None:
            return None
        return WantMapper.to_want_response(want)
