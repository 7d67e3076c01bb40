"""HTTP layer: FastAPI application and routers."""
