"""
Load testing for the Movie Catalog Gateway using Locust.

Compares the direct async route with the blocking continuation route under
the same load:

    locust -f tests/performance/locustfile.py --host http://localhost:8000
"""

from locust import HttpUser, TaskSet, task, between


class MovieCatalogTasks(TaskSet):
    """Load tests for the movie catalog routes."""

    def _get_catalogs(self, path: str, expected_catalogs: int):
        with self.client.get(path, name=path, catch_response=True) as response:
            if response.status_code != 200:
                response.failure(f"Unexpected status code: {response.status_code}")
                return
            data = response.json()
            if len(data) != expected_catalogs:
                response.failure(f"Expected {expected_catalogs} catalogs, got {len(data)}")
            else:
                response.success()

    @task(3)
    def get_all_movies_async(self):
        self._get_catalogs("/api/movies/getallmoviesasync", 1)

    @task(3)
    def get_all_movies_blocking(self):
        self._get_catalogs("/api/movies/getallmovies", 1)

    @task(1)
    def get_all_movies2(self):
        self._get_catalogs("/api/movies/getallmovies2", 1)

    @task(2)
    def get_movies_by_genre(self):
        self._get_catalogs("/api/movies/getmoviesbygenreasync", 4)

    @task(1)
    def health(self):
        self.client.get("/health")


class MovieCatalogUser(HttpUser):
    """Simulated API caller."""

    tasks = [MovieCatalogTasks]
    wait_time = between(0.5, 2)
