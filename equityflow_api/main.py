"""FastAPI app with Strawberry GraphQL."""

from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

from equityflow_api.schema import schema

app = FastAPI(title="Equity Cash Flow Pricing API", version="0.1.0")
graphql_app = GraphQLRouter(schema)
app.include_router(graphql_app, prefix="/graphql")


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness check for the pricing service."""
    return {"status": "ok"}
