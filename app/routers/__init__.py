from app.routers.apartments import router as apartments_router
from app.routers.developers import router as developers_router
from app.routers.compounds import router as compounds_router
from app.routers.amenities import router as amenities_router

__all__ = ["apartments_router", "developers_router", "compounds_router", "amenities_router"]
