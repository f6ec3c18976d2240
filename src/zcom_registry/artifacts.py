"""
JavaScript variable files for registered CNS and contract entries.

Each successful registration can be written to a small ``zcom-*.js`` file
declaring the address (and ABI) as constants. ``compile_output_files``
later merges every such file in a directory into one CommonJS module.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

from .errors import InvalidContractNameError
from .utils import atomic_write_text, utc_now_rfc3339

logger = logging.getLogger(__name__)

FILE_PREFIX = "zcom-"
CNS_FILE_NAME = "zcom-cns.js"
COMPILED_FILE_NAME = "zcom-vars-compiled.js"

_CONTRACT_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_DECLARATION_RE = re.compile(r"^\s*(?:const|let|var)\s+([A-Za-z_$][\w$]*)\s*=", re.MULTILINE)


def cns_file_content(address: str) -> str:
    return f"const CNS_ADDRESS = '{address}';"


def check_contract_name(contract_name: str) -> None:
    """Raise ``InvalidContractNameError`` unless the name can prefix a JS constant."""
    if not contract_name or _CONTRACT_NAME_RE.fullmatch(contract_name) is None:
        raise InvalidContractNameError(f"Invalid contract name: {contract_name!r}")


def contract_file_name(contract_name: str) -> str:
    check_contract_name(contract_name)
    return f"{FILE_PREFIX}{contract_name.lower()}.js"


def contract_file_content(contract_name: str, address: str, abi: str) -> str:
    check_contract_name(contract_name)
    prefix = contract_name.upper()
    return f'const {prefix}_ADDRESS = "{address}";\nconst {prefix}_ABI = {abi};'


def write_cns_file(output_dir: Path, address: str) -> Path:
    return atomic_write_text(Path(output_dir) / CNS_FILE_NAME, cns_file_content(address))


def write_contract_file(output_dir: Path, contract_name: str, address: str, abi: str) -> Path:
    path = Path(output_dir) / contract_file_name(contract_name)
    return atomic_write_text(path, contract_file_content(contract_name, address, abi.strip()))


def find_output_files(output_dir: Path, exclude: Iterable[str] = ()) -> list[Path]:
    """List ``zcom-*.js`` files in ``output_dir``, sorted by name."""
    skipped = set(exclude)
    return sorted(
        path
        for path in Path(output_dir).glob(f"{FILE_PREFIX}*.js")
        if path.is_file() and path.name not in skipped
    )


def declared_names(source: str) -> list[str]:
    return _DECLARATION_RE.findall(source)


def render_compiled_module(sources: list[tuple[str, str]]) -> str:
    """
    Render the compiled module.

    Args:
        sources: (file name, file content) pairs in output order

    Returns:
        Module text exporting every declared constant
    """
    lines = [f"// Generated by zcom-registry on {utc_now_rfc3339()}. Do not edit."]
    if sources:
        lines.append("// Sources: " + ", ".join(name for name, _ in sources))
    lines.append("")

    names: list[str] = []
    for _, content in sources:
        body = content.strip()
        if not body:
            continue
        lines.append(body)
        lines.append("")
        names.extend(n for n in declared_names(body) if n not in names)

    if names:
        lines.append("module.exports = {")
        lines.extend(f"    {name}," for name in names)
        lines.append("};")
    else:
        lines.append("module.exports = {};")
    return "\n".join(lines) + "\n"


def compile_output_files(
    output_dir: Path,
    delete_inputs: bool = False,
    file_name: Optional[str] = None,
) -> Path:
    """
    Merge the ``zcom-*.js`` files of ``output_dir`` into one module.

    Args:
        output_dir: Directory holding the variable files
        delete_inputs: Remove the merged files afterwards
        file_name: Name of the compiled file (default: zcom-vars-compiled.js)

    Returns:
        Path of the compiled file
    """
    output_dir = Path(output_dir)
    target = output_dir / (file_name or COMPILED_FILE_NAME)
    inputs = find_output_files(output_dir, exclude={target.name, COMPILED_FILE_NAME})

    sources = [(path.name, path.read_text(encoding="utf-8")) for path in inputs]
    atomic_write_text(target, render_compiled_module(sources))
    logger.info("Compiled %d file(s) into %s", len(inputs), target)

    if delete_inputs:
        for path in inputs:
            path.unlink()
            logger.debug("Deleted %s", path)

    return target
