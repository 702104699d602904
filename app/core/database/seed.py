from __future__ import annotations

import shutil
from pathlib import Path
from typing import Iterable, List

import structlog

log = structlog.get_logger()


def seed_datasets(seed_dir: Path, data_dir: Path, filenames: Iterable[str], overwrite: bool = False) -> List[str]:
    """
    Copy bundled dataset files into the data dir on first boot.

    A file is copied when its seed exists and the destination is missing (or
    ``overwrite`` is set). Returns the names that were copied.
    """
    data_dir.mkdir(parents=True, exist_ok=True)
    copied: List[str] = []
    for name in filenames:
        src = seed_dir / name
        dst = data_dir / name
        log.info(
            "seed_check",
            src=str(src),
            dst=str(dst),
            src_exists=src.exists(),
            dst_exists=dst.exists(),
            overwrite=overwrite,
        )
        if (not dst.exists() or overwrite) and src.exists():
            shutil.copyfile(src, dst)
            copied.append(name)
            log.info("dataset_seeded", file=name, overwrite=overwrite)
    return copied
