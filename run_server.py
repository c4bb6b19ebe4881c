import os
from hybrid_reasoner.api.server import app

PORT = int(os.environ.get("PORT", "5002"))

if __name__ == "__main__":
    if os.environ.get("APP_ENV", "production") == "production":
        from waitress import serve
        print(f"Serving hybrid reasoner with Waitress on port {PORT}...")
        serve(app, host="0.0.0.0", port=PORT, threads=int(os.environ.get("WAITRESS_THREADS", "4")))
    else:
        print(f"Starting development server on port {PORT}...")
        app.run(debug=True, port=PORT, host="0.0.0.0")
