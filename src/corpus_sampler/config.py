from dataclasses import dataclass
from pathlib import Path

import yaml

from .sampling.sampler import SamplingKind


@dataclass(frozen=True)
class SampleConfig:
    size_mb: float
    kind: SamplingKind
    seed: int | None = None
    write_metadata: bool = True


@dataclass(frozen=True)
class SamplerConfig:
    languages: list[str]
    input_dir: Path
    output_dir: Path
    sample: SampleConfig
    force: bool = False


def _require_mapping(data: object, config_path: Path) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"Config at '{config_path}' must be a YAML mapping.")
    return data


def _require_str(data: dict, key: str, config_path: Path) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Config key '{key}' in '{config_path}' must be a non-empty string.")
    return value.strip()


def _require_str_list(data: dict, key: str, config_path: Path) -> list[str]:
    value = data.get(key)
    if not isinstance(value, list) or not value:
        raise ValueError(f"Config key '{key}' in '{config_path}' must be a non-empty list.")
    out: list[str] = []
    for i, item in enumerate(value):
        if not isinstance(item, str) or not item.strip():
            raise ValueError(
                f"Config key '{key}' in '{config_path}' has invalid item at index {i}; "
                "expected non-empty string."
            )
        out.append(item.strip())
    return out


def _require_bool(data: dict, key: str, default: bool, config_path: Path) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"Config key '{key}' in '{config_path}' must be a boolean.")
    return value


def _load_sample_config(data: dict, config_path: Path) -> SampleConfig:
    sample_raw = data.get("sample")
    if not isinstance(sample_raw, dict):
        raise ValueError(f"Config key 'sample' in '{config_path}' must be a mapping.")

    size_mb_raw = sample_raw.get("size_mb")
    # bool is an int subclass
    if (
        isinstance(size_mb_raw, bool)
        or not isinstance(size_mb_raw, (int, float))
        or size_mb_raw <= 0
    ):
        raise ValueError(
            f"Config key 'sample.size_mb' in '{config_path}' must be a positive number."
        )

    kind_raw = _require_str(sample_raw, "kind", config_path).lower()
    try:
        kind = SamplingKind(kind_raw)
    except ValueError:
        choices = "|".join(k.value for k in SamplingKind)
        raise ValueError(
            f"Config key 'sample.kind' in '{config_path}' must be one of {choices}."
        ) from None

    seed = sample_raw.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ValueError(f"Config key 'sample.seed' in '{config_path}' must be an integer.")

    write_metadata = _require_bool(sample_raw, "write_metadata", True, config_path)

    return SampleConfig(
        size_mb=float(size_mb_raw),
        kind=kind,
        seed=seed,
        write_metadata=write_metadata,
    )


def load_config(config_path: Path) -> SamplerConfig:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    data = _require_mapping(raw, config_path)
    languages = _require_str_list(data, "languages", config_path)
    input_dir = Path(_require_str(data, "input_dir", config_path))
    output_dir = Path(_require_str(data, "output_dir", config_path))
    force = _require_bool(data, "force", False, config_path)
    sample = _load_sample_config(data, config_path)

    return SamplerConfig(
        languages=languages,
        input_dir=input_dir,
        output_dir=output_dir,
        sample=sample,
        force=force,
    )
