"""Runtime settings, read from the environment.

``OSR_DATA_DIR``       directory holding orders.json, customers.json
                       and products.json (default: <repo>/data)
``OSR_CURRENCY``       currency code for parsed amounts (default: INR)
``OSR_BUSINESS_NAME``  title prefix for exported documents
``OSR_PDF_FONT``       optional TrueType font for statement PDFs
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from osr.domain.model.value_objects import DEFAULT_CURRENCY

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_BUSINESS_NAME = "Jay Goga Milk"


@dataclass(frozen=True)
class Settings:

    data_dir: Path = DEFAULT_DATA_DIR
    currency: str = DEFAULT_CURRENCY
    business_name: str = DEFAULT_BUSINESS_NAME
    pdf_font: Path | None = None

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        data_dir = env.get("OSR_DATA_DIR")
        pdf_font = env.get("OSR_PDF_FONT")
        return Settings(
            data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
            currency=env.get("OSR_CURRENCY") or DEFAULT_CURRENCY,
            business_name=env.get("OSR_BUSINESS_NAME") or DEFAULT_BUSINESS_NAME,
            pdf_font=Path(pdf_font).expanduser() if pdf_font else None,
        )
