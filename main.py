from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
import logging

from config import get_settings
from currency import REFERENCE_CURRENCY, is_supported_currency, supported_currencies, to_ils
from errors import SettleUpError
from models import (
    BalancesResult,
    ConversionResult,
    CurrencyTable,
    GroupRecord,
    SettlementResult,
    SpendingSummary,
    TransfersRequest,
    TransfersResult,
)
from settlement_optimizer import SettlementOptimizer

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SettleUp API",
    description="Group balances and debt settlement over a shared expense ledger",
    version="1.0.0"
)

# CORS middleware to allow frontend connections
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ===== API ENDPOINTS =====
@app.get("/")
async def root():
    return {"message": "SettleUp API"}

@app.post("/balances", response_model=BalancesResult)
async def calculate_balances(group: GroupRecord):
    """Net balance per member; positive means the member is owed money"""
    try:
        balances = SettlementOptimizer.calculate_balances(group)
    except SettleUpError as e:
        logger.error(f"Error calculating balances: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    return {"balances": balances}

@app.post("/transfers", response_model=TransfersResult)
async def plan_transfers(request: TransfersRequest):
    """Transfers that bring every balance back to zero"""
    return {"transfers": SettlementOptimizer.minimize_transactions(request.balances)}

@app.post("/settlements", response_model=SettlementResult)
async def calculate_settlements(group: GroupRecord):
    """Balances and settlement transfers for a group"""
    try:
        result = SettlementOptimizer.optimize_settlements(group)
    except SettleUpError as e:
        logger.error(f"Error calculating settlements: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        f"Settled {len(result['balances'])} members with {len(result['transfers'])} transfers"
    )
    return result

@app.post("/spending", response_model=SpendingSummary)
async def get_group_spending(group: GroupRecord):
    """Spending breakdown by category, reimbursements excluded"""
    return SettlementOptimizer.summarize_spending(group)

@app.get("/currencies", response_model=CurrencyTable)
async def list_currencies():
    return {
        "reference_currency": REFERENCE_CURRENCY,
        "rates": supported_currencies()
    }

@app.get("/convert", response_model=ConversionResult)
async def convert(amount: float, currency: Optional[str] = Query(None)):
    """Convert an amount into ILS; unknown currencies pass through unchanged"""
    supported = currency in (None, REFERENCE_CURRENCY) or is_supported_currency(currency)
    if not supported:
        logger.warning(f"Unknown currency {currency}, amount left unconverted")

    return {
        "amount": amount,
        "currency": currency,
        "amount_ils": to_ils(amount, currency),
        "supported": supported
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
