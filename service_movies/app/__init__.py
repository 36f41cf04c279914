"""
Movies Service package for the Movie Catalog Gateway.

The service fronts a set of remote JSON movie catalogs and returns them to
callers, fetching several sources concurrently when asked to.

Structure:
- app.main: FastAPI app, routes, and lifecycle wiring.
- app.managers: MovieManager, the seam between routes and adapters.
- app.adapters: shared HTTP client and the catalog gateway.
- app.models: the Movie record and catalog aliases.
"""
