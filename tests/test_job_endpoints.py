from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi.testclient import TestClient

from jobly_backend.api.dependencies import ADMIN_REQUIRED_MESSAGE

NEW_JOB = {"title": "new", "salary": 100_000, "equity": 0.1, "companyHandle": "c1"}

J1 = {"id": 1, "title": "j1", "salary": 100_000, "equity": "0.1", "companyHandle": "c1"}


def test_create_as_admin(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.post("/jobs", json=NEW_JOB, headers=admin_headers)

    assert response.status_code == 201
    job = response.json()["job"]
    assert isinstance(job["id"], int)
    assert job == {**NEW_JOB, "id": job["id"], "equity": "0.1"}


def test_create_forbidden_for_non_admin(
    client: TestClient, u1_headers: dict[str, str]
) -> None:
    response = client.post("/jobs", json=NEW_JOB, headers=u1_headers)

    assert response.status_code == 403
    assert response.json() == {"error": {"message": ADMIN_REQUIRED_MESSAGE, "status": 403}}


def test_create_with_missing_data(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.post(
        "/jobs", json={"title": "new", "salary": 100_000}, headers=admin_headers
    )

    assert response.status_code == 400


def test_create_with_invalid_data(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.post(
        "/jobs", json={**NEW_JOB, "salary": "not-a-number"}, headers=admin_headers
    )

    assert response.status_code == 400


def test_create_with_equity_above_one(
    client: TestClient, admin_headers: dict[str, str]
) -> None:
    response = client.post("/jobs", json={**NEW_JOB, "equity": 1.5}, headers=admin_headers)

    assert response.status_code == 400


def test_create_for_unknown_company(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.post(
        "/jobs", json={**NEW_JOB, "companyHandle": "nope"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "No company: nope"


def test_list_for_anon(client: TestClient) -> None:
    response = client.get("/jobs")

    assert response.status_code == 200
    jobs = response.json()["jobs"]
    assert [job["title"] for job in jobs] == ["j1", "j2", "j3"]
    assert jobs[0] == J1


def test_list_by_title(client: TestClient) -> None:
    response = client.get("/jobs", params={"title": "j1"})

    assert response.json() == {"jobs": [J1]}


def test_list_by_title_with_wildcard(client: TestClient) -> None:
    response = client.get("/jobs", params={"title": "%"})

    assert response.json() == {"jobs": []}


def test_list_by_min_salary(client: TestClient) -> None:
    response = client.get("/jobs", params={"minSalary": 250_000})

    assert [job["title"] for job in response.json()["jobs"]] == ["j3"]


def test_list_by_equity(client: TestClient) -> None:
    with_equity = client.get("/jobs", params={"hasEquity": "true"})
    without_filter = client.get("/jobs", params={"hasEquity": "false"})

    assert [job["title"] for job in with_equity.json()["jobs"]] == ["j1", "j2"]
    assert len(without_filter.json()["jobs"]) == 3


def test_list_by_company(client: TestClient) -> None:
    response = client.get("/jobs", params={"companyHandle": "c2"})

    assert [job["title"] for job in response.json()["jobs"]] == ["j2"]


def test_list_with_non_numeric_min_salary(client: TestClient) -> None:
    response = client.get("/jobs", params={"minSalary": "lots"})

    assert response.status_code == 400
    assert response.json()["error"]["status"] == 400


def test_get_for_anon(client: TestClient) -> None:
    response = client.get("/jobs/1")

    assert response.status_code == 200
    assert response.json() == {"job": J1}


def test_get_missing(client: TestClient) -> None:
    response = client.get("/jobs/9999")

    assert response.status_code == 404


def test_get_with_out_of_range_id(client: TestClient) -> None:
    response = client.get("/jobs/99999999999999999999999")

    assert response.status_code == 400
    assert response.json()["error"]["status"] == 400


def test_get_with_non_positive_id(client: TestClient) -> None:
    assert client.get("/jobs/0").status_code == 400


def test_update_as_admin(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.patch("/jobs/1", json={"title": "new"}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"job": {**J1, "title": "new"}}


def test_update_to_title_taken_at_same_company(
    client: TestClient, admin_headers: dict[str, str]
) -> None:
    created = client.post(
        "/jobs", json={"title": "other", "companyHandle": "c1"}, headers=admin_headers
    ).json()["job"]

    response = client.patch(
        f"/jobs/{created['id']}", json={"title": "j1"}, headers=admin_headers
    )

    assert response.status_code == 400
    assert response.json() == {"error": {"message": "Duplicate job: j1", "status": 400}}
    assert client.get(f"/jobs/{created['id']}").json()["job"]["title"] == "other"


def test_update_forbidden_for_non_admin(
    client: TestClient, u1_headers: dict[str, str]
) -> None:
    response = client.patch("/jobs/1", json={"title": "new"}, headers=u1_headers)

    assert response.status_code == 403


def test_update_missing(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.patch("/jobs/9999", json={"title": "new"}, headers=admin_headers)

    assert response.status_code == 404


def test_update_rejects_id_change(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.patch("/jobs/1", json={"id": 0}, headers=admin_headers)

    assert response.status_code == 400


def test_update_rejects_company_change(
    client: TestClient, admin_headers: dict[str, str]
) -> None:
    response = client.patch("/jobs/1", json={"companyHandle": "c2"}, headers=admin_headers)

    assert response.status_code == 400


def test_update_with_invalid_data(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.patch("/jobs/1", json={"title": 0}, headers=admin_headers)

    assert response.status_code == 400


def test_delete_as_admin(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.delete("/jobs/1", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"deleted": "1"}


def test_delete_forbidden_for_non_admin(
    client: TestClient, u1_headers: dict[str, str]
) -> None:
    response = client.delete("/jobs/1", headers=u1_headers)

    assert response.status_code == 403


def test_delete_missing(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.delete("/jobs/9999", headers=admin_headers)

    assert response.status_code == 404


def test_delete_with_out_of_range_id(client: TestClient, admin_headers: dict[str, str]) -> None:
    response = client.delete("/jobs/99999999999999999999999", headers=admin_headers)

    assert response.status_code == 400
