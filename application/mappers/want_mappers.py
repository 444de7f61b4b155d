from application.dtos.want_dtos import WantResponse
from domain.aggregates.want import Want


class WantMapper:
    @staticmethod
    def to_want_response(want: Want) -> WantResponse:
        """Map a persisted Want aggregate to a WantResponse DTO.

        Args:
            want: The Want aggregate to map. Must carry a store-assigned id.

        Returns:
            WantResponse: The mapped response DTO

        """
        if want.id is None:
            msg = "Cannot map a Want that has not been persisted"
            raise ValueError(msg)
        return WantResponse(
            want_id=want.id,
            creator=want.creator,
            admins=list(want.admins),
            title=want.title,
            description=want.description,
            visibility=want.visibility,
            image=want.image,
            created_at=want.created_at,
            updated_at=want.updated_at,
        )
