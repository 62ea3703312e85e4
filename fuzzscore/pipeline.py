import inspect
import logging
import os
from functools import partial
from typing import Callable, List, Optional, Tuple

import pandas as pd
import yaml
from tqdm import tqdm

from .fuzz import get_scorer
from .process import default_processor, extract_one

logger = logging.getLogger(__name__)

# default config keys used:
# general:
#   review_threshold: 65
# matching:
#   scorer: wratio
#   force_ascii: true
#   full_process: true
# fields:
#   query_field: Query
#   choice_field: Choice


def load_config(path=None):
    if path:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}
    # fallback packaged config
    pkg_cfg = os.path.join(os.path.dirname(__file__), "config_default.yaml")
    with open(pkg_cfg, "r") as f:
        return yaml.safe_load(f)


def build_scorer(matching_cfg: dict) -> Callable[[str, str], int]:
    """Resolve the configured scorer and bind whichever flags it accepts."""
    scorer = get_scorer(str(matching_cfg.get("scorer", "wratio")))
    params = inspect.signature(scorer).parameters
    flags = {}
    if "force_ascii" in params:
        flags["force_ascii"] = bool(matching_cfg.get("force_ascii", True))
    if "full_process" in params:
        flags["full_process"] = bool(matching_cfg.get("full_process", True))
    return partial(scorer, **flags) if flags else scorer


def load_choices(path: str, choice_field: str = "Choice") -> List[str]:
    """Choices from a CSV column, or one per line from any other file."""
    if path.lower().endswith(".csv"):
        choices_df = pd.read_csv(path, dtype=str).fillna("")
        if choice_field not in choices_df.columns:
            raise ValueError(f"Column {choice_field!r} not found in {path}")
        return choices_df[choice_field].tolist()
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def run_pipeline(input_csv: str,
                 output_csv: str,
                 choices_path: str,
                 config_path: str = None) -> Tuple[pd.DataFrame, Optional[str]]:
    cfg = load_config(config_path)
    general = cfg.get("general", {}) or {}
    review_th = int(general.get("review_threshold", 65))
    progress = bool(general.get("progress", False))

    matching_cfg = cfg.get("matching", {}) or {}
    scorer = build_scorer(matching_cfg)
    score_cutoff = int(matching_cfg.get("score_cutoff", 0))
    processor = default_processor if matching_cfg.get("full_process", True) else None

    fields = cfg.get("fields", {}) or {}
    query_field = fields.get("query_field", "Query")
    choice_field = fields.get("choice_field", "Choice")

    choices = load_choices(choices_path, choice_field)
    logger.info("Loaded %d choices from %s", len(choices), choices_path)
    indexed_choices = dict(enumerate(choices))

    df = pd.read_csv(input_csv, dtype=str).fillna("")
    if query_field not in df.columns:
        raise ValueError(f"Column {query_field!r} not found in {input_csv}")

    df["Best_Match"] = ""
    df["Match_Score"] = 0
    df["Match_Index"] = -1

    review_rows = []
    rows = tqdm(df.iterrows(), total=len(df), desc="Matching", disable=not progress)
    for i, row in rows:
        query = str(row[query_field])
        best = extract_one(query, indexed_choices, processor=processor,
                           scorer=scorer, score_cutoff=score_cutoff) if query else None
        if best is not None:
            choice, score, idx = best
            df.at[i, "Best_Match"] = choice
            df.at[i, "Match_Score"] = int(score)
            df.at[i, "Match_Index"] = int(idx)
        else:
            logger.debug("No match for row %s (query %r)", i, query)

        if int(df.at[i, "Match_Score"]) < review_th:
            review_rows.append(i)

    # save outputs
    os.makedirs(os.path.dirname(output_csv) or ".", exist_ok=True)
    df.to_csv(output_csv, index=False)
    logger.info("Matched %d rows, %d below review threshold %d", len(df), len(review_rows), review_th)

    review_path = None
    if review_rows:
        review_df = df.loc[review_rows].copy()
        base, ext = os.path.splitext(output_csv)
        review_path = f"{base}.review_queue{ext or '.csv'}"
        review_df.to_csv(review_path, index=False)

    return df, review_path
