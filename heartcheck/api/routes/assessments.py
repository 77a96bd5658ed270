"""Risk assessment route.

Anyone can score a form; signed-in users also get the record saved to
their history. A failed save is reported in the response but never
discards the computed result.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from heartcheck.api.deps import get_optional_record_store, get_optional_user
from heartcheck.core.errors import PersistenceError
from heartcheck.services.health_record_store import HealthRecordStore
from heartcheck.services.input_validation import parse_health_form
from heartcheck.services.record_assembler import assemble_record
from heartcheck.services.risk_engine import evaluate_risk, risk_summary
from heartcheck.services.risk_factors import medical_condition_messages
from heartcheck.services.simulated_predictor import (
    format_simulated_risk,
    predict_simulated_risk,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assessments", tags=["assessments"])


@router.post("/")
def create_assessment(
    payload: Dict[str, Any] = Body(...),
    user: Optional[dict] = Depends(get_optional_user),
    store: Optional[HealthRecordStore] = Depends(get_optional_record_store),
):
    # 1) Validate (raises InvalidInputError -> 422)
    health_input = parse_health_form(payload)

    # 2) Score
    assessment = evaluate_risk(health_input)
    simulated = predict_simulated_risk(assessment.total_score, health_input.age)

    # 3) Build record
    record = assemble_record(health_input, assessment)

    # 4) Save when signed in
    saved = False
    record_id = None
    save_error = None
    if user is None or store is None:
        logger.info("User not logged in or store unavailable. Results not saved.")
    else:
        try:
            record_id = store.save(user["uid"], record)
            saved = True
        except PersistenceError as exc:
            save_error = "Failed to save your results. Please try again."
            logger.warning("Assessment computed but not saved: %s", exc)

    return {
        "assessment": assessment.to_dict(),
        "summary": risk_summary(assessment),
        "medical_conditions": medical_condition_messages(list(assessment.factors)),
        "simulated_risk": round(simulated, 1),
        "simulated_risk_text": format_simulated_risk(simulated),
        "record": {"id": record_id, **record.to_document()},
        "saved": saved,
        "save_error": save_error,
    }
