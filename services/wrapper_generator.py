"""Chunk wrapper generation for ChunkLink - universal loader code per chunk.

Compiled chunks rename their top-level bindings into properties of a single
shared namespace object so separately compiled chunks can still see each
other's symbols. The root chunk creates that object and publishes a handle
to it on its exports; every other chunk retrieves the same object through
the root chunk's import alias instead of creating its own.
"""

import json
from typing import Dict, List

from core.models import ChunkGraph, ChunkGraphNode
from core.types import WrapperText

NAMESPACE_OBJECT = '$'

COMPILED_SUFFIX = '_compressed'

OUTPUT_PLACEHOLDER = '%output%'

NAMESPACE_HANDLE = 'internal_'

_WRAPPER_TEMPLATE = """\
// Do not edit this file; automatically generated.

/* eslint-disable */
;(function(root, factory) {{
  if (typeof define === 'function' && define.amd) {{ // AMD
    define([{amd_deps}], factory);
  }} else if (typeof exports === 'object') {{ // Node.js
    module.exports = factory({cjs_deps});
  }} else {{ // Browser
    root.{exports} = factory({browser_deps});
  }}
}}(this, function({imports}) {{
{preamble}
{placeholder}
{postamble}
return {namespace}.{exports};
}}));
"""


class WrapperGenerator:
    """Generates a UMD wrapper for each resolved chunk.

    The wrapper offers AMD, CommonJS and browser-global loading for the same
    compiled body, which the compiler substitutes for the placeholder.
    """

    def __init__(
        self,
        namespace: str = NAMESPACE_OBJECT,
        compiled_suffix: str = COMPILED_SUFFIX,
        extension: str = 'js',
        handle: str = NAMESPACE_HANDLE,
        placeholder: str = OUTPUT_PLACEHOLDER,
    ):
        self.namespace = namespace
        self.compiled_suffix = compiled_suffix
        self.extension = extension
        self.handle = handle
        self.placeholder = placeholder

    def output_filename(self, node: ChunkGraphNode) -> str:
        return f"{node.name}{self.compiled_suffix}.{self.extension}"

    def default_preamble(self, node: ChunkGraphNode) -> str:
        if node.is_root:
            return f"const {self.namespace}={{}};"
        root = node.root.definition
        return f"const {self.namespace}={root.import_alias}.{self.handle};"

    def default_postamble(self, node: ChunkGraphNode) -> str:
        if node.is_root:
            exports = node.definition.exports_path
            return f"{self.namespace}.{exports}.{self.handle}={self.namespace};"
        return ''

    def factory_inputs(self, node: ChunkGraphNode) -> List[ChunkGraphNode]:
        """Chunks passed to the factory: direct dependencies, then the root.

        The root is appended when it is not a direct dependency, since the
        default preamble reads the namespace handle from its exports.
        """
        inputs = list(node.dependencies)
        if not node.is_root and node.root.name not in node.dependency_names:
            inputs.append(node.root)
        return inputs

    def generate(self, node: ChunkGraphNode) -> WrapperText:
        """Generate the wrapper text for one chunk."""
        definition = node.definition
        inputs = self.factory_inputs(node)
        file_names = [
            json.dumps(f"./{self.output_filename(dependency)}")
            for dependency in inputs
        ]

        preamble = definition.factory_preamble
        if preamble is None:
            preamble = self.default_preamble(node)
        postamble = definition.factory_postamble
        if postamble is None:
            postamble = self.default_postamble(node)

        return WrapperText(_WRAPPER_TEMPLATE.format(
            amd_deps=', '.join(file_names),
            cjs_deps=', '.join(f"require({name})" for name in file_names),
            browser_deps=', '.join(
                f"root.{dependency.definition.exports_path}" for dependency in inputs
            ),
            imports=', '.join(dependency.definition.import_alias for dependency in inputs),
            exports=definition.exports_path,
            preamble=preamble,
            placeholder=self.placeholder,
            postamble=postamble,
            namespace=self.namespace,
        ))

    def generate_all(self, graph: ChunkGraph) -> Dict[str, WrapperText]:
        """Generate wrappers for every chunk, in declared order."""
        return {node.name: self.generate(node) for node in graph}

    def compiler_wrapper_specs(self, graph: ChunkGraph) -> List[str]:
        """Render ``name:wrapper`` strings for the compiler's chunk_wrapper option."""
        return [f"{name}:{wrapper}" for name, wrapper in self.generate_all(graph).items()]
