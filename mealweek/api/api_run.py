from typing import Optional
import logging

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from mealweek.domain.Errors import MealPlannerError
from mealweek.events.web_observers import start as start_event_observers, get_events as get_web_events

# Routers
from mealweek.api.routes import meal_plan, recipes
from mealweek.api.api_ai import router as ai_router

# Logging
logger = logging.getLogger("mealweek")

# Initialize FastAPI app
app = FastAPI(title="Recipe Box & Weekly Meal Plan API")

# Include routers (import route before /api/recipes/{id})
app.include_router(ai_router)
app.include_router(recipes.router)
app.include_router(meal_plan.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for web notifications when the app starts."""
    start_event_observers()
    logger.info("Web observers for meal plan events started")


@app.exception_handler(MealPlannerError)
async def _meal_planner_error_handler(request: Request, exc: MealPlannerError):
    level = logging.ERROR if exc.status_code >= 500 else logging.INFO
    logger.log(level, "%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.get("/api/health")
def health():
    return {"status": "ok"}


# -------------------- API: events (polling) --------------------
@app.get("/api/events")
def api_events(since: Optional[int] = Query(default=None)):
    return get_web_events(since)
