"""
Send demo names to a running Name Clusters API, once through /group and once through /cluster.

Run with the API already running (python run_api.py). Optionally set NAME_CLUSTERS_API_URL in env.
Usage: python seed_demo_names.py
"""

import os

import httpx

NAME_CLUSTERS_API_URL = (os.environ.get("NAME_CLUSTERS_API_URL") or "http://localhost:8000").rstrip("/")

# Demo names: a few diagnoses and symptoms that share vocabulary in small groups
DEMO_NAMES = [
    "Anxiety disorder",
    "Generalized anxiety disorder",
    "Anxiety attack",
    "Major depression",
    "Depression (recurrent)",
    "Dental plaque",
    "Dental caries",
    "Iron deficiency",
    "Vitamin D deficiency",
    "Nutrition counselling",
    "",
    "Unrelated topic entirely",
]

DEMO_SEEDS = [
    {"label": "mental health", "name": "anxiety depression"},
    {"label": "dental", "name": "dental caries plaque"},
    {"label": "nutrition", "name": "nutrition deficiency vitamin iron"},
]


def group_payload(names: list[str]) -> dict:
    return {"items": names}


def cluster_payload(names: list[str], seeds: list[dict]) -> dict:
    return {**group_payload(names), "seeds": seeds}


def _print_clusters(clusters: list[dict]) -> None:
    for c in clusters:
        print(f"  {c['label']!r}: size={c['size']} words={c['word_set']}")


def main():
    print(f"Clustering {len(DEMO_NAMES)} demo names via {NAME_CLUSTERS_API_URL}")
    client = httpx.Client(timeout=30.0)
    try:
        r = client.post(f"{NAME_CLUSTERS_API_URL}/group", json=group_payload(DEMO_NAMES))
        if r.is_success:
            data = r.json()
            print(f"/group -> {data['cluster_count']} clusters")
            _print_clusters(data["clusters"])
        else:
            print(f"/group FAILED {r.status_code} {r.text[:200]}")

        r = client.post(f"{NAME_CLUSTERS_API_URL}/cluster", json=cluster_payload(DEMO_NAMES, DEMO_SEEDS))
        if r.is_success:
            data = r.json()
            print(f"/cluster -> {len(data['clusters'])} seeds, {data['rejected_count']} rejected")
            _print_clusters(data["clusters"])
            for name in data["rejected"]:
                print(f"  rejected: {name!r}")
        else:
            print(f"/cluster FAILED {r.status_code} {r.text[:200]}")
    finally:
        client.close()


if __name__ == "__main__":
    main()
