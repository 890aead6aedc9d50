from fastapi.testclient import TestClient

from api.main import app

client = TestClient(app)


def test_health():
    assert client.get("/health").json() == {"ok": True}


def test_algorithms_listing():
    data = client.get("/api/algorithms").json()
    assert [a["id"] for a in data] == ["kmp", "rabin-karp", "z-algorithm"]
    assert all(a["name"] and a["description"] for a in data)


def test_match_single():
    r = client.post("/api/match", json={
        "text": "abababcabababcabcabc",
        "patterns": "ababc",
        "algorithm": "rabin-karp",
    })
    assert r.status_code == 200
    body = r.json()
    assert body["benchmark"] is False
    entry = body["results"][0]
    assert entry["key"] == 0
    assert entry["matches"] == [2, 9]
    assert entry["spans"] == [[9, 14], [2, 7]]
    assert entry["steps"][0]["kind"] == "hash-compare"


def test_match_without_steps():
    r = client.post("/api/match", json={
        "text": "aaaa", "patterns": "aa", "algorithm": "kmp", "include_steps": False,
    })
    assert r.json()["results"][0]["steps"] is None


def test_match_benchmark():
    r = client.post("/api/match", json={"text": "aaaa", "patterns": "aa,a", "algorithm": "all"})
    body = r.json()
    assert body["benchmark"] is True
    assert [e["key"] for e in body["results"]] == ["kmp", "rabin-karp", "z-algorithm"]
    assert all(len(e["matches"]) == 7 and e["steps"] is None for e in body["results"])


def test_input_error_maps_to_422():
    r = client.post("/api/match", json={"text": "", "patterns": "a", "algorithm": "kmp"})
    assert r.status_code == 422
    assert r.json()["error"] == "input"


def test_unknown_algorithm_maps_to_400():
    r = client.post("/api/match", json={"text": "abc", "patterns": "a", "algorithm": "naive"})
    assert r.status_code == 400
    assert r.json()["error"] == "configuration"
