import asyncio
import json
import os
import sys

from dotenv import load_dotenv
import httpx

# --- Configuration ---
# Load environment variables from .env file
load_dotenv()
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")
DATA_FILE = os.path.join(os.path.dirname(__file__), '..', 'data', 'movies.json')


async def upload_data_via_api():
    """
    Uploads categories and their movies through the API endpoints.
    """
    async with httpx.AsyncClient(base_url=API_BASE_URL, timeout=10.0) as client:
        # --- Health Check ---
        try:
            print(f"Checking API health at {API_BASE_URL}/health_check...")
            health_response = await client.get("/health_check")
            health_response.raise_for_status()
            print("API is healthy. Proceeding with data upload.")
        except (httpx.RequestError, httpx.HTTPStatusError) as e:
            print(f"Error: API health check failed: {e}")
            print("Please ensure the API is running and API_BASE_URL is correct.")
            return 1

        try:
            with open(DATA_FILE, "r", encoding="utf-8") as f:
                categories_data = json.load(f)
        except FileNotFoundError:
            print(f"Error: {DATA_FILE} not found.")
            return 1

        for cat_data in categories_data:
            response = await client.post("/api/categories", json={"CategoryName": cat_data["name"]})
            if response.status_code != 201:
                print(f"Error creating category '{cat_data['name']}': {response.text}")
                continue
            category_id = response.json()["Id"]
            print(f"Created category {category_id}: {cat_data['name']}")

            for movie in cat_data.get("movies", []):
                payload = {
                    "Title": movie["title"],
                    "Year": movie["year"],
                    "Duration": movie["duration"],
                    "CategoryId": category_id,
                }
                response = await client.post("/api/movies", json=payload)
                if response.status_code == 201:
                    print(f"  Created movie: {movie['title']}")
                else:
                    print(f"  Error creating movie '{movie['title']}': {response.text}")

    print("\nData upload process finished.")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(upload_data_via_api()))
