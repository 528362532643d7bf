import logging
import os

from fastapi import FastAPI

from calculator.rates import rate_table
from service.core.models import SimulationRequest, SimulationResponse
from service.core.pipeline import run_analysis

LOG_LEVEL = os.getenv("BPJSTK_LOG_LEVEL", "INFO").upper()
API_TITLE = os.getenv("BPJSTK_API_TITLE", "BPJS Ketenagakerjaan Simulator API")
LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

app = FastAPI(title=API_TITLE)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/rates")
def rates():
    return rate_table()


@app.post("/simulate", response_model=SimulationResponse)
def simulate(payload: SimulationRequest):
    return run_analysis(payload)
