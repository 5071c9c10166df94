import dataclasses
import pathlib
import typing

import yaml

from parsez.code_frame import CodeFrameOptions
from parsez.opt import opt


@dataclasses.dataclass(frozen=True)
class Config:
    command: str
    statements: list[str] = dataclasses.field(default_factory=list)
    code_frame: CodeFrameOptions = CodeFrameOptions()


def _check_keys(data: dict, allowed: typing.Iterable[str], where: str):
    unknown = set(data) - set(allowed)
    if unknown:
        raise ValueError(f'Unknown keys in {where}: {", ".join(sorted(unknown))}')


def _field_names(cls) -> list[str]:
    return [f.name for f in dataclasses.fields(cls)]


def from_dict(data: dict) -> Config:
    if not isinstance(data, dict):
        raise ValueError(f'Expected a mapping, got {type(data).__name__}')
    _check_keys(data, _field_names(Config), 'config')

    code_frame = data.get('code_frame') >> opt.map(_code_frame_options) >> opt.value_or(CodeFrameOptions())
    command = data.get('command') >> opt.value_or_raise('Missing required key: command')
    return Config(command=str(command),
                  statements=[str(s) for s in data.get('statements') or []],
                  code_frame=code_frame)


def _code_frame_options(data: dict) -> CodeFrameOptions:
    _check_keys(data, _field_names(CodeFrameOptions), 'code_frame')
    return CodeFrameOptions(**{k: int(v) for k, v in data.items()})


def load(path) -> Config:
    with open(pathlib.Path(path), encoding='utf-8') as file:
        return from_dict(yaml.safe_load(file))
