import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nft_market.config import settings
from nft_market.contracts.lcd import LcdClient

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    lcd_client = LcdClient(settings.lcd_url, timeout=settings.lcd_timeout_seconds)
    await lcd_client.initialize()
    app.state.lcd_client = lcd_client
    logger.info(f"Using LCD {settings.lcd_url} ({settings.chain_id}), market {settings.market_contract_address or '<unset>'}")
    yield
    await lcd_client.close()


app = FastAPI(
    title="NFT Market Message API",
    description="Prepares unsigned marketplace messages (listings, bids, order execution, cancellation, collection admin) and proxies marketplace queries.",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

from nft_market.routes import market  # noqa: E402

app.include_router(market.router, prefix="/v1/market", tags=["Market"])


@app.get("/health")
async def health():
    return {"status": "ok"}
