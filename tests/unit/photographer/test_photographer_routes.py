import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from fastapi.testclient import TestClient
from fastapi import FastAPI, HTTPException

from frontend.routers.rou_photographer import router
from frontend.configuration.upstream import get_api_client
from frontend.models.mod_package import Package
from frontend.models.mod_photographer import Photographer
from frontend.models.mod_portfolio import Portfolio
from frontend.schemas.sch_photographer import TIME_SLOTS
from frontend.services.svc_api import ApiError, register_error_handlers
from frontend.services.svc_package import PackageService
from frontend.services.svc_photographer import PhotographerService
from frontend.services.svc_portfolio import PortfolioService

app = FastAPI()
app.include_router(router)
register_error_handlers(app)

mock_api = MagicMock()
app.dependency_overrides[get_api_client] = lambda: mock_api

@pytest.fixture
def client():
    return TestClient(app)

@pytest.fixture
def photographer():
    return Photographer(_id="p1", fullName="Ansel Adams", categories=["nature"], price=300)

def upstream_error(status_code=502):
    return HTTPException(status_code=status_code, detail=ApiError.notification(ApiError.UPSTREAM))

def test_list_photographers_applies_fallback_filter(client, photographer):
    pricey = Photographer(_id="p2", fullName="Annie Leibovitz", price=900)
    with patch.object(PhotographerService, 'search_photographers',
                      new=AsyncMock(return_value=[photographer, pricey])) as mock_search:
        response = client.get("/photographers/", params={"max_price": 500, "categories": "nature,travel"})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["photographers"][0]["_id"] == "p1"
    assert mock_search.call_args.args[1].categories == ["nature", "travel"]

def test_list_photographers_falls_back_to_full_list(client, photographer):
    with patch.object(PhotographerService, 'search_photographers', new=AsyncMock(side_effect=upstream_error())), \
         patch.object(PhotographerService, 'get_all_photographers', new=AsyncMock(return_value=[photographer])):
        response = client.get("/photographers/", params={"search": "ansel"})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["notifications"] == []

def test_photographer_detail(client, photographer):
    packages = [
        Package(_id="k1", name="Basic", price=150),
        Package(_id="k2", name="Retired", price=90, isActive=False),
    ]
    portfolios = [
        Portfolio(_id="f1", title="Mountains"),
        Portfolio(_id="f2", title="Drafts", isPublished=False),
    ]
    with patch.object(PhotographerService, 'get_photographer', new=AsyncMock(return_value=photographer)), \
         patch.object(PackageService, 'get_public_packages', new=AsyncMock(return_value=packages)), \
         patch.object(PortfolioService, 'get_public_portfolios', new=AsyncMock(return_value=portfolios)):
        response = client.get("/photographers/p1")

    assert response.status_code == 200
    body = response.json()
    assert [p["_id"] for p in body["packages"]] == ["k1"]
    assert [p["_id"] for p in body["portfolios"]] == ["f1"]
    assert body["timeSlots"] == TIME_SLOTS

def test_photographer_detail_degrades(client, photographer):
    with patch.object(PhotographerService, 'get_photographer', new=AsyncMock(return_value=photographer)), \
         patch.object(PackageService, 'get_public_packages', new=AsyncMock(side_effect=upstream_error())), \
         patch.object(PortfolioService, 'get_public_portfolios', new=AsyncMock(return_value=[])):
        response = client.get("/photographers/p1")

    assert response.status_code == 200
    body = response.json()
    assert body["packages"] == []
    assert body["notifications"][0]["title"] == "Failed to Load Packages"

def test_photographer_detail_not_found(client):
    with patch.object(PhotographerService, 'get_photographer', new=AsyncMock(side_effect=upstream_error(404))):
        response = client.get("/photographers/missing")

    assert response.status_code == 404

def test_update_profile_requires_photographer(client):
    response = client.put("/photographers/profile", data={"bio": "Mountains"})

    assert response.status_code == 401
