"""HTTP routes for the Flask API."""

import math
from http import HTTPStatus
from typing import Any, Callable, Dict, Type

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import BadRequest

from moneylab.app.config import __version__
from moneylab.core.compound import project_compound
from moneylab.core.fire import simulate_fire
from moneylab.core.health import check_health_insurance
from moneylab.core.kids import simulate_kids_account
from moneylab.core.lottery import calculate_lottery
from moneylab.core.money import format_currency
from moneylab.core.net_worth import estimate_net_worth
from moneylab.core.retirement import simulate_retirement
from moneylab.core.tax_saving import compare_tax_saving
from moneylab.schemas.compound import CompoundParams
from moneylab.schemas.fire import FireParams
from moneylab.schemas.health import HealthParams
from moneylab.schemas.kids import KidsParams
from moneylab.schemas.lottery import LotteryParams
from moneylab.schemas.net_worth import NetWorthParams
from moneylab.schemas.ping import PingResponse
from moneylab.schemas.retirement import RetirementParams
from moneylab.schemas.tax_saving import TaxSavingParams

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    current_app.logger.info("rejected %s: %d validation error(s)", request.path, exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


def _calculate(params_model: Type[BaseModel], calculator: Callable[[Any], BaseModel]) -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    params = params_model.model_validate(raw_payload)
    result = calculator(params)
    return jsonify(result.model_dump(mode="json"))


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint; also advertises the calculator routes."""
    calculators = sorted(
        rule.rule for rule in current_app.url_map.iter_rules() if rule.rule.startswith("/api/calc/")
    )
    response = PingResponse(message="pong", version=__version__, calculators=calculators)
    return jsonify(response.model_dump())


@api_bp.get("/format/currency")
def currency() -> Any:
    amount = request.args.get("amount", type=float)
    if amount is None or not math.isfinite(amount):
        raise BadRequest("query parameter 'amount' must be a finite number")
    return jsonify({"amount": amount, "formatted": format_currency(amount)})


@api_bp.post("/calc/compound")
def compound() -> Any:
    """Compound vs simple interest table."""
    return _calculate(CompoundParams, project_compound)


@api_bp.post("/calc/retirement")
def retirement() -> Any:
    """Retirement drawdown; an impossible age pair comes back as ``error: true``."""
    return _calculate(RetirementParams, simulate_retirement)


@api_bp.post("/calc/fire")
def fire() -> Any:
    return _calculate(FireParams, simulate_fire)


@api_bp.post("/calc/tax-saving")
def tax_saving() -> Any:
    return _calculate(TaxSavingParams, compare_tax_saving)


@api_bp.post("/calc/kids")
def kids() -> Any:
    return _calculate(KidsParams, simulate_kids_account)


@api_bp.post("/calc/health")
def health() -> Any:
    return _calculate(HealthParams, check_health_insurance)


@api_bp.post("/calc/lottery")
def lottery() -> Any:
    return _calculate(LotteryParams, calculate_lottery)


@api_bp.post("/calc/net-worth")
def net_worth() -> Any:
    return _calculate(NetWorthParams, estimate_net_worth)
