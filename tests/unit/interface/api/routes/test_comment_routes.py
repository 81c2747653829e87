"""HTTP tests for tour comments."""

from uuid import uuid4

from tour.domain.value import TourStatus
from tests.conftest import join_tour, save_user, seed_tour


class TestComments:
    def test_post_list_edit_delete(self, client, seed, sign_in, csrf_headers):
        owner, tour = seed(seed_tour)
        sign_in(owner)
        base = f"/api/tours/{tour.id}/comments"

        created = client.post(base, json={"content": "Who books the hut?"}, headers=csrf_headers)
        comment_id = created.json()["id"]
        edited = client.patch(
            f"{base}/{comment_id}",
            json={"content": "Who books the hut? Deadline Friday"},
            headers=csrf_headers,
        )
        listed = client.get(base)
        deleted = client.delete(f"{base}/{comment_id}", headers=csrf_headers)

        assert created.status_code == 201
        assert created.json()["author"] == {
            "user_id": str(owner.id),
            "display_name": "Olivia",
        }
        assert created.json()["is_author"] is True
        assert edited.status_code == 200
        assert edited.json()["is_edited"] is True
        assert [c["content"] for c in listed.json()["data"]] == [
            "Who books the hut? Deadline Friday"
        ]
        assert deleted.status_code == 204
        assert client.get(base).json()["pagination"]["total"] == 0

    def test_other_participant_cannot_edit(self, client, seed, sign_in, csrf_headers):
        owner, tour = seed(seed_tour)
        member = seed(save_user)
        seed(join_tour, tour, member)
        base = f"/api/tours/{tour.id}/comments"
        sign_in(owner)
        comment_id = client.post(
            base, json={"content": "Packing list soon"}, headers=csrf_headers
        ).json()["id"]
        sign_in(member)

        edit = client.patch(
            f"{base}/{comment_id}", json={"content": "No"}, headers=csrf_headers
        )
        delete = client.delete(f"{base}/{comment_id}", headers=csrf_headers)

        assert edit.status_code == 403
        assert delete.status_code == 403

    def test_archived_tour_rejects_comments(self, client, seed, sign_in, csrf_headers):
        owner, tour = seed(seed_tour, TourStatus.ARCHIVED)
        sign_in(owner)

        response = client.post(
            f"/api/tours/{tour.id}/comments",
            json={"content": "Great trip"},
            headers=csrf_headers,
        )

        assert response.status_code == 400

    def test_empty_and_oversized_content(self, client, seed, sign_in, csrf_headers):
        owner, tour = seed(seed_tour)
        sign_in(owner)
        base = f"/api/tours/{tour.id}/comments"

        assert client.post(base, json={"content": ""}, headers=csrf_headers).status_code == 422
        assert (
            client.post(base, json={"content": "x" * 5001}, headers=csrf_headers).status_code
            == 422
        )
        assert client.post(base, json={"content": "  "}, headers=csrf_headers).status_code == 400

    def test_unknown_comment(self, client, seed, sign_in, csrf_headers):
        owner, tour = seed(seed_tour)
        sign_in(owner)

        response = client.delete(
            f"/api/tours/{tour.id}/comments/{uuid4()}", headers=csrf_headers
        )

        assert response.status_code == 404

    def test_pagination_limit_is_capped(self, client, seed, sign_in):
        owner, tour = seed(seed_tour)
        sign_in(owner)

        response = client.get(f"/api/tours/{tour.id}/comments", params={"limit": 101})

        assert response.status_code == 422
