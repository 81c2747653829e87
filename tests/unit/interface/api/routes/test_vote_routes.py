"""HTTP tests for voting."""

from tests.conftest import join_tour, save_user, seed_tour


class TestVotes:
    def test_toggle_and_tally(self, client, seed, sign_in, csrf_headers):
        owner, tour = seed(seed_tour)
        sign_in(owner)

        added = client.post(f"/api/tours/{tour.id}/vote", headers=csrf_headers)
        tally = client.get(f"/api/tours/{tour.id}/votes")
        removed = client.post(f"/api/tours/{tour.id}/vote", headers=csrf_headers)

        assert added.status_code == 200
        assert added.json() == {"voted": True, "message": "Vote added", "vote_count": 1}
        assert tally.json()["voters"] == [
            {"user_id": str(owner.id), "display_name": "Olivia"}
        ]
        assert removed.json()["voted"] is False
        assert removed.json()["vote_count"] == 0

    def test_locked_voting_is_bad_request(self, client, seed, sign_in, csrf_headers):
        owner, tour = seed(seed_tour)
        member = seed(save_user)
        seed(join_tour, tour, member)
        sign_in(owner)
        client.post(f"/api/tours/{tour.id}/voting/lock", headers=csrf_headers)
        sign_in(member)

        response = client.post(f"/api/tours/{tour.id}/vote", headers=csrf_headers)

        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "BAD_REQUEST",
            "message": "Voting is locked for this tour",
        }
        assert client.get(f"/api/tours/{tour.id}/votes").json()["voting_locked"] is True

    def test_stranger_cannot_vote(self, client, seed, sign_in, csrf_headers):
        _, tour = seed(seed_tour)
        sign_in(seed(save_user, "stranger@example.com"))

        response = client.post(f"/api/tours/{tour.id}/vote", headers=csrf_headers)

        assert response.status_code == 404

    def test_vote_requires_csrf(self, client, seed, sign_in):
        owner, tour = seed(seed_tour)
        sign_in(owner)

        assert client.post(f"/api/tours/{tour.id}/vote").status_code == 403
