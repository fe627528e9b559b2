#!/usr/bin/env python3
"""
Script para evaluar el stock de un archivo JSON de medicamentos
"""
import argparse
import json
import sys
import os
from datetime import date

# Agregar el directorio raíz al path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from stockcare.core.config import get_settings
from stockcare.core.dependencies import resolve_reference_date
from stockcare.schemas.medication import StockBatchRequest
from stockcare.services.requirement_service import build_requirement_report
from stockcare.services.stock_service import StockService
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Evaluar stock de medicamentos")
    parser.add_argument("path", help="Archivo JSON con una lista de medicamentos")
    parser.add_argument("--date", dest="reference_date", type=date.fromisoformat, default=None,
                        help="Fecha de referencia (YYYY-MM-DD), por defecto hoy")
    return parser.parse_args(argv)


def main(argv=None):
    """Función principal"""
    args = parse_args(argv)
    settings = get_settings()

    with open(args.path, encoding="utf-8") as fh:
        payload = json.load(fh)

    if isinstance(payload, list):
        payload = {"medications": payload}

    request = StockBatchRequest.parse_obj(payload)
    medications = request.to_domain()
    reference_date = resolve_reference_date(args.reference_date or request.reference_date, settings)

    logger.info(f"📅 Fecha de referencia: {reference_date}")
    logger.info(f"💊 Medicamentos: {len(medications)}")

    stock_service = StockService(reference_date, settings.LOW_STOCK_DAYS)
    for assessment in stock_service.inventory(medications):
        medication = assessment.medication
        label = assessment.supply_label or "-"
        review = " ⚠️ revisar" if assessment.needs_review else ""
        logger.info(
            f"   {assessment.status.value:<8} {medication.name or medication.id}: "
            f"{assessment.simple_days_remaining} días, {label}{review}"
        )

    summary = stock_service.summarize(medications)
    logger.info(
        f"📊 Bajo: {summary.low} - Crítico: {summary.critical} - "
        f"Por revisar: {summary.needs_review} - OK: {summary.ok}"
    )

    report = build_requirement_report(medications, settings.REQUIREMENT_DAYS_TO_COVER)
    for line in report.missing:
        logger.info(f"   ❌ {line.medication.name}: faltan {line.deficit} tabletas")

    return summary.critical == 0 and summary.needs_review == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
