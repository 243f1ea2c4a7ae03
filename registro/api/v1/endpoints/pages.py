from fastapi import APIRouter, Depends, Response

from registro.api.deps import get_resolver
from registro.services.static_service import ADMIN_DOCUMENT, StaticAsset, StaticAssetResolver

router = APIRouter(tags=["Pages"])


def _asset_response(asset: StaticAsset) -> Response:
    return Response(content=asset.content, media_type=asset.media_type)


@router.get("/admin")
def admin_page(resolver: StaticAssetResolver = Depends(get_resolver)):
    return _asset_response(resolver.read(ADMIN_DOCUMENT))


# Must stay the last route registered: it swallows every remaining GET.
@router.get("/{asset_path:path}")
def static_asset(asset_path: str, resolver: StaticAssetResolver = Depends(get_resolver)):
    return _asset_response(resolver.read(asset_path))
