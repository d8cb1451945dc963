"""
Inspect DIMACS CNF files.

Usage:
    python inspect_cnf.py 'files=[bench/uf20-01.cnf]'
    python inspect_cnf.py 'files=[a.cnf,b.cnf]' reader.check_bounds=true
    python inspect_cnf.py 'files=[a.cnf]' solve=true solver=cd
"""

import logging
from pathlib import Path

import hydra
from omegaconf import DictConfig, OmegaConf
from tqdm import tqdm

from dimacs_cnf import DimacsError, ReaderConfig, load_cnf

logger = logging.getLogger(__name__)


def resolve_path(path: str, orig_cwd: str) -> str:
    """Resolve a potentially relative path against the original working directory."""
    p = Path(path)
    if not p.is_absolute():
        p = Path(orig_cwd) / p
    return str(p)


def summarize(path: str, formula) -> str:
    lengths = [len(clause) for clause in formula.clauses]
    avg_len = sum(lengths) / len(lengths) if lengths else 0.0
    return (
        f"{path}: {formula.num_vars} vars (max used {formula.max_var()}), "
        f"{formula.num_clauses} clauses, avg length {avg_len:.2f}"
    )


@hydra.main(version_base=None, config_path="configs", config_name="default")
def main(cfg: DictConfig):
    # Hydra can redirect logging; make sure it shows on console
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s", force=True)

    orig_cwd = hydra.utils.get_original_cwd()
    reader_cfg = OmegaConf.merge(OmegaConf.structured(ReaderConfig), cfg.reader)

    if not cfg.files:
        logger.warning("No files given, pass files=[...]")
        return

    failures = 0
    for name in tqdm(cfg.files, desc="Reading"):
        path = resolve_path(name, orig_cwd)
        try:
            formula = load_cnf(path, reader_cfg)
        except (DimacsError, OSError) as e:
            logger.error("%s: %s", path, e)
            failures += 1
            continue

        print(summarize(path, formula))
        for comment in formula.comments:
            print(f"  {comment}")

        if cfg.solve:
            from dimacs_cnf.solver import solve_cnf

            with open(path, "r", encoding=reader_cfg.encoding) as f:
                model = solve_cnf(f, name=cfg.solver)
            print(f"  {'SAT' if model is not None else 'UNSAT'}")

    logger.info("Read %d files, %d failed", len(cfg.files), failures)


if __name__ == "__main__":
    main()
