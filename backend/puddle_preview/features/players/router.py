from typing import Annotated

from fastapi import APIRouter, Path, Response

from .dependencies import PlayerPreviewServiceDep

router = APIRouter(prefix="/player", tags=["players"])

# Player ids are signed 64-bit integers upstream
PlayerId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.get("/{player_id}/{char_id}")
async def get_player_preview(
    player_id: PlayerId, char_id: str, service: PlayerPreviewServiceDep
) -> Response:
    """Render the preview for one player's character.

    Upstream and decode failures surface as 500, a missing character as 404;
    both are handled by the application's exception handlers.
    """
    preview = await service.render_preview(player_id, char_id)
    return Response(content=preview.content, media_type=preview.media_type)
