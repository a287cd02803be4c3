import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.dependencies import cleanup_dependencies, deps, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import currency, preferences
from config.settings import Settings, get_settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	init_dependencies()
	await deps.db.create_tables()
	logger.info(f'{app.title} ready with {len(deps.currency_service.rates.codes)} currencies')

	yield

	await cleanup_dependencies()


async def unhandled_exception_handler(request: Request, exc: Exception):
	logger.error(f'Unhandled exception on {request.url.path}: {exc}', exc_info=True)
	return JSONResponse(status_code=500, content={'detail': 'Internal server error'})


def create_app(settings: Settings | None = None) -> FastAPI:
	settings = settings or get_settings()

	app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
	app.add_exception_handler(Exception, unhandled_exception_handler)
	register_exception_handlers(app)

	app.include_router(currency.router)
	app.include_router(preferences.router)
	return app


app = create_app()
