"""Closure Compiler provider for ChunkLink - runs the optimizing compiler."""

import shlex
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from loguru import logger
from pydantic import BaseModel, Field

from core.exceptions import ToolExecutionError
from core.types import CompilationLevel, WarningLevel

# Diagnostic groups treated as errors in debug and strict builds.
JSCOMP_ERROR: List[str] = [
    'accessControls',
    'checkPrototypalTypes',
    'checkRegExp',
    'checkTypes',
    'checkVars',
    'conformanceViolations',
    'const',
    'constantProperty',
    'deprecated',
    'deprecatedAnnotations',
    'duplicateMessage',
    'es5Strict',
    'externsValidation',
    'extraRequire',
    'functionParams',
    'globalThis',
    'invalidCasts',
    'misplacedTypeAnnotation',
    'missingPolyfill',
    'missingProperties',
    'missingProvide',
    'missingRequire',
    'missingReturn',
    'moduleLoad',
    'msgDescriptions',
    'nonStandardJsDocs',
    'strictModuleDepCheck',
    'suspiciousCode',
    'typeInvalidation',
    'undefinedVars',
    'underscore',
    'unknownDefines',
    'unusedLocalVariables',
    'unusedPrivateMembers',
    'uselessCode',
    'untranspilableFeatures',
    'visibility',
]


class CompilerOptions(BaseModel):
    """Default compiler option set, overridable per build."""

    compilation_level: CompilationLevel = Field(
        default=CompilationLevel.SIMPLE_OPTIMIZATIONS,
        description="Optimization level"
    )

    warning_level: WarningLevel = Field(
        default=WarningLevel.DEFAULT,
        description="Warning verbosity"
    )

    language_in: str = Field(default='ECMASCRIPT_2020')

    language_out: str = Field(default='ECMASCRIPT5_STRICT')

    rewrite_polyfills: bool = Field(default=True)

    hide_warnings_for: List[str] = Field(default_factory=lambda: ['node_modules'])

    define: List[str] = Field(default_factory=lambda: ['COMPILED=true'])

    externs: List[str] = Field(default_factory=list)

    jscomp_error: List[str] = Field(
        default_factory=list,
        description="Diagnostic groups promoted to errors"
    )

    @classmethod
    def for_build(
        cls,
        externs: Sequence[str] = (),
        verbose: bool = False,
        debug: bool = False,
        strict: bool = False,
        version: Optional[str] = None,
        version_define: str = 'VERSION',
    ) -> "CompilerOptions":
        """Create the option set used for a chunked build.

        Debug and strict builds promote the JSCOMP_ERROR groups to errors;
        strict builds also promote 'strictCheckTypes'.
        """
        jscomp_error: List[str] = []
        if debug or strict:
            jscomp_error = list(JSCOMP_ERROR)
            if strict:
                jscomp_error.append('strictCheckTypes')

        define = ['COMPILED=true']
        if version:
            define.append(f'{version_define}="{version}"')

        return cls(
            warning_level=WarningLevel.VERBOSE if verbose else WarningLevel.DEFAULT,
            externs=list(externs),
            jscomp_error=jscomp_error,
            define=define,
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode='json')


def render_flags(options: Dict[str, Any]) -> List[str]:
    """Render an option mapping as compiler command-line flags.

    Lists repeat the flag once per item, True renders a bare flag, False and
    None are omitted.
    """
    flags: List[str] = []
    for key, value in options.items():
        if value is None or value is False:
            continue
        if value is True:
            flags.append(f"--{key}")
        elif isinstance(value, (list, tuple)):
            flags.extend(f"--{key}={item}" for item in value)
        else:
            flags.append(f"--{key}={getattr(value, 'value', value)}")
    return flags


class ClosureCompiler:
    """Runs google-closure-compiler over staged sources in chunk output mode."""

    def __init__(
        self,
        command: str = "google-closure-compiler",
        cwd: Optional[Union[str, Path]] = None,
    ):
        self._command = shlex.split(command)
        self._cwd = Path(cwd) if cwd else None

    @property
    def name(self) -> str:
        return Path(self._command[-1]).name if self._command else "closure-compiler"

    def build_command(
        self,
        options: Dict[str, Any],
        sources: Sequence[Union[str, Path]],
        output_dir: Union[str, Path],
    ) -> List[str]:
        command = list(self._command)
        command.extend(render_flags(options))
        command.append(f"--chunk_output_path_prefix={Path(output_dir)}/")
        command.append("--create_source_map=%outname%.map")
        command.extend(f"--js={source}" for source in sources)
        return command

    def compile(
        self,
        options: Dict[str, Any],
        sources: Sequence[Union[str, Path]],
        output_dir: Union[str, Path],
        cwd: Optional[Union[str, Path]] = None,
    ) -> List[Path]:
        """Compile all chunks in one invocation.

        Source paths are resolved against ``cwd`` (or the provider default)
        and become the ``sources`` of the emitted source maps.

        Returns:
            The emitted ``<chunk>.js`` paths in chunk order

        Raises:
            ToolExecutionError: If the compiler cannot be started or fails
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        command = self.build_command(options, sources, output_dir)
        logger.info(f"Compiling {len(sources)} files with {self.name}")

        try:
            subprocess.run(command, check=True, cwd=cwd or self._cwd)
        except subprocess.CalledProcessError as e:
            raise ToolExecutionError(
                self.name,
                command=command,
                returncode=e.returncode,
                reason="compilation failed",
                cause=e,
            )
        except OSError as e:
            raise ToolExecutionError(self.name, command=command, reason=str(e), cause=e)

        chunk_names = [spec.split(":", 1)[0] for spec in options.get("chunk", [])]
        return [output_dir / f"{name}.js" for name in chunk_names]
