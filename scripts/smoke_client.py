import os
import sys
import json
import requests

BASE_URL = os.environ.get("SMOKE_URL") or os.environ.get("DEV_URL", "http://127.0.0.1:5002")
API = f"{BASE_URL.rstrip('/')}/api"

def get(path: str):
    r = requests.get(f"{API}{path}", timeout=10)
    r.raise_for_status()
    return r

def post(path: str, payload: dict):
    r = requests.post(f"{API}{path}", json=payload, timeout=20)
    r.raise_for_status()
    return r

def main():
    print(f"[smoke] Target: {API}")
    print("[smoke] /health:", get("/health").status_code)
    print("[smoke] /version:", get("/version").status_code)
    print("[smoke] /corpus:", get("/corpus").json().get("count"), "documents")

    r = post("/reason", {"query": "cloud computing resources", "mode": "auto"})
    body = r.json()
    print("[smoke] /reason:", r.status_code, body.get("decision"), "fallback" if body.get("used_fallback") else "confident")
    print(json.dumps(body, indent=2)[:400])

    r = post("/reason/batch", {"queries": ["blockchain", "machine learning", ""]})
    print("[smoke] /reason/batch:", r.status_code, r.json().get("count"), "results")
    print("[smoke] /stats/reasoning:", json.dumps(get("/stats/reasoning").json()))

if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print("[smoke] FAILED:", e)
        sys.exit(1)
