"""
Unit tests for gig application and ranked booking sequence endpoints.
"""

import uuid

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _make_band(client: AsyncClient, user_id: str, name: str):
    payload = {
        "name": name,
        "phone": "555-0199",
        "email": f"{name.lower().replace(' ', '')}@bands.test",
        "genre": "rock",
        "profile_picture": "https://img.test/band.png",
        "user_id": user_id,
    }
    response = await client.post("/api/v1/bands", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["band"]


async def _apply(client: AsyncClient, gig_id: str, band_id: str, **extra):
    response = await client.post("/api/v1/gig_applicants", json={"gig_id": gig_id, "band_id": band_id, **extra})
    assert response.status_code == 201, response.text
    return response.json()["applicant"]


@pytest.fixture
async def applicants(client: AsyncClient, gig, band, band_user):
    """Three applications to the gig, in the order they were made."""
    others = [await _make_band(client, band_user["id"], name) for name in ("Second Act", "Third Act")]
    result = [await _apply(client, gig["id"], band["id"])]
    for other in others:
        result.append(await _apply(client, gig["id"], other["id"]))
    return result


class TestApply:
    async def test_apply_defaults_band_name(self, client: AsyncClient, gig, band):
        applicant = await _apply(client, gig["id"], band["id"])
        assert applicant["band_name"] == "The Loud Band"
        assert applicant["status"] == "pending"
        assert applicant["rank"] is None

    async def test_apply_with_custom_name(self, client: AsyncClient, gig, band):
        applicant = await _apply(client, gig["id"], band["id"], band_name="Loud Band (acoustic)")
        assert applicant["band_name"] == "Loud Band (acoustic)"

    async def test_apply_twice_conflicts(self, client: AsyncClient, gig, band):
        await _apply(client, gig["id"], band["id"])

        response = await client.post("/api/v1/gig_applicants", json={"gig_id": gig["id"], "band_id": band["id"]})
        assert response.status_code == 409
        assert response.json() == {"error": "This band has already applied to this gig"}

    async def test_unknown_gig(self, client: AsyncClient, band):
        response = await client.post(
            "/api/v1/gig_applicants", json={"gig_id": str(uuid.uuid4()), "band_id": band["id"]}
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Gig not found"}

    async def test_unknown_band(self, client: AsyncClient, gig):
        response = await client.post(
            "/api/v1/gig_applicants", json={"gig_id": gig["id"], "band_id": str(uuid.uuid4())}
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Band not found"}

    async def test_missing_fields(self, client: AsyncClient):
        response = await client.post("/api/v1/gig_applicants", json={})
        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: gig_id, band_id"


class TestListApplicants:
    async def test_unranked_in_application_order(self, client: AsyncClient, gig, applicants):
        response = await client.get("/api/v1/gig_applicants", params={"gig_id": gig["id"]})
        assert response.status_code == 200
        assert [a["id"] for a in response.json()["applicants"]] == [a["id"] for a in applicants]

    async def test_requires_gig_id(self, client: AsyncClient):
        response = await client.get("/api/v1/gig_applicants")
        assert response.status_code == 400
        assert response.json() == {"error": "gig_id parameter required"}


class TestUpdateApplicant:
    async def test_accept_and_rank(self, client: AsyncClient, gig, applicants):
        last = applicants[-1]
        response = await client.patch("/api/v1/gig_applicants", json={"id": last["id"], "status": "accepted", "rank": 1})
        assert response.status_code == 200
        updated = response.json()["applicant"]
        assert updated["status"] == "accepted"
        assert updated["rank"] == 1

        listing = await client.get("/api/v1/gig_applicants", params={"gig_id": gig["id"]})
        assert listing.json()["applicants"][0]["id"] == last["id"]

    async def test_invalid_rank(self, client: AsyncClient, applicants):
        response = await client.patch("/api/v1/gig_applicants", json={"id": applicants[0]["id"], "rank": 0})
        assert response.status_code == 400

    async def test_rank_above_shortlist_size(self, client: AsyncClient, applicants):
        response = await client.patch("/api/v1/gig_applicants", json={"id": applicants[0]["id"], "rank": 42})
        assert response.status_code == 400
        assert response.json()["details"][0].startswith("rank:")

    async def test_rank_held_by_another_applicant(self, client: AsyncClient, gig, applicants):
        first, second, _ = applicants
        await client.patch("/api/v1/gig_applicants", json={"id": first["id"], "rank": 1})

        response = await client.patch("/api/v1/gig_applicants", json={"id": second["id"], "rank": 1})
        assert response.status_code == 400
        assert response.json() == {"error": "Rank 1 is already held by another applicant"}

        listing = await client.get("/api/v1/gig_applicants", params={"gig_id": gig["id"]})
        assert [a["rank"] for a in listing.json()["applicants"]] == [1, None, None]

    async def test_same_rank_on_other_gig_is_free(self, client: AsyncClient, gig, band, venue, applicants):
        await client.patch("/api/v1/gig_applicants", json={"id": applicants[0]["id"], "rank": 1})
        other_gig = await client.post(
            "/api/v1/gigs",
            json={
                "title": "Saturday Blues",
                "venueId": venue["id"],
                "venue": venue["name"],
                "location": "Austin, TX",
                "date": "2026-11-07",
                "time": "9:00 PM",
                "price": "$300",
                "genre": ["blues"],
            },
        )
        assert other_gig.status_code == 201, other_gig.text
        other = await _apply(client, other_gig.json()["gig"]["id"], band["id"])

        response = await client.patch("/api/v1/gig_applicants", json={"id": other["id"], "rank": 1})
        assert response.status_code == 200
        assert response.json()["applicant"]["rank"] == 1

    async def test_keeping_own_rank(self, client: AsyncClient, applicants):
        first = applicants[0]
        await client.patch("/api/v1/gig_applicants", json={"id": first["id"], "rank": 2})

        response = await client.patch(
            "/api/v1/gig_applicants", json={"id": first["id"], "rank": 2, "status": "accepted"}
        )
        assert response.status_code == 200
        assert response.json()["applicant"]["rank"] == 2

    async def test_applied_at_is_utc(self, client: AsyncClient, applicants):
        listing = await client.get("/api/v1/gig_applicants", params={"gig_id": applicants[0]["gig_id"]})
        stamp = listing.json()["applicants"][0]["applied_at"]
        assert stamp.endswith("Z") or stamp.endswith("+00:00")

    async def test_id_required(self, client: AsyncClient):
        response = await client.patch("/api/v1/gig_applicants", json={"status": "rejected"})
        assert response.status_code == 400
        assert response.json() == {"error": "Applicant id required"}

    async def test_unknown_applicant(self, client: AsyncClient):
        response = await client.patch("/api/v1/gig_applicants", json={"id": str(uuid.uuid4()), "status": "rejected"})
        assert response.status_code == 404
        assert response.json() == {"error": "Applicant not found"}


class TestRanking:
    async def test_rank_orders_booking_sequence(self, client: AsyncClient, gig, applicants):
        first, second, third = applicants
        response = await client.post(
            "/api/v1/gig_applicants/ranking", json={"gig_id": gig["id"], "applicant_ids": [third["id"], first["id"]]}
        )
        assert response.status_code == 200
        ordered = response.json()["applicants"]
        assert [a["id"] for a in ordered] == [third["id"], first["id"], second["id"]]
        assert [a["rank"] for a in ordered] == [1, 2, None]

    async def test_rerank_clears_previous_ranks(self, client: AsyncClient, gig, applicants):
        first, second, _ = applicants
        await client.post(
            "/api/v1/gig_applicants/ranking", json={"gig_id": gig["id"], "applicant_ids": [first["id"], second["id"]]}
        )

        response = await client.post(
            "/api/v1/gig_applicants/ranking", json={"gig_id": gig["id"], "applicant_ids": [second["id"]]}
        )
        ranks = {a["id"]: a["rank"] for a in response.json()["applicants"]}
        assert ranks[second["id"]] == 1
        assert ranks[first["id"]] is None

    async def test_empty_ranking_unranks_everyone(self, client: AsyncClient, gig, applicants):
        response = await client.post("/api/v1/gig_applicants/ranking", json={"gig_id": gig["id"], "applicant_ids": []})
        assert response.status_code == 200
        assert all(a["rank"] is None for a in response.json()["applicants"])

    async def test_at_most_five(self, client: AsyncClient, gig):
        ids = [str(uuid.uuid4()) for _ in range(6)]
        response = await client.post("/api/v1/gig_applicants/ranking", json={"gig_id": gig["id"], "applicant_ids": ids})
        assert response.status_code == 400
        assert response.json() == {"error": "At most 5 applicants can be ranked"}

    async def test_duplicates_rejected(self, client: AsyncClient, gig, applicants):
        same = applicants[0]["id"]
        response = await client.post(
            "/api/v1/gig_applicants/ranking", json={"gig_id": gig["id"], "applicant_ids": [same, same]}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Duplicate applicant ids"}

    async def test_foreign_applicant_rejected(self, client: AsyncClient, gig, applicants):
        response = await client.post(
            "/api/v1/gig_applicants/ranking",
            json={"gig_id": gig["id"], "applicant_ids": [applicants[0]["id"], str(uuid.uuid4())]},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Every ranked applicant must belong to the gig"}


class TestWithdraw:
    async def test_delete(self, client: AsyncClient, gig, applicants):
        response = await client.delete("/api/v1/gig_applicants", params={"id": applicants[0]["id"]})
        assert response.status_code == 200

        listing = await client.get("/api/v1/gig_applicants", params={"gig_id": gig["id"]})
        assert len(listing.json()["applicants"]) == 2

    async def test_deleting_gig_removes_applications(self, client: AsyncClient, gig, applicants):
        await client.delete("/api/v1/gigs", params={"id": gig["id"]})

        listing = await client.get("/api/v1/gig_applicants", params={"gig_id": gig["id"]})
        assert listing.json() == {"applicants": []}

    async def test_unknown_applicant(self, client: AsyncClient):
        response = await client.delete("/api/v1/gig_applicants", params={"id": str(uuid.uuid4())})
        assert response.status_code == 404
