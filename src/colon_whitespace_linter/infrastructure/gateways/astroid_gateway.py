import codecs
import logging
from typing import Optional

import astroid  # type: ignore[import-untyped]
from astroid import nodes
from astroid.builder import AstroidBuilder

from colon_whitespace_linter.domain.entities import ColonSite, ConstructKind
from colon_whitespace_linter.domain.protocols import AstroidProtocol
from colon_whitespace_linter.infrastructure.gateways.source_text import SourceText

logger = logging.getLogger(__name__)

Entry = tuple[nodes.NodeNG, nodes.NodeNG]


class AstroidGateway(AstroidProtocol):
    """Locates key/value colons of astroid mapping nodes."""

    def construct_kind(self, node: nodes.NodeNG) -> Optional[ConstructKind]:
        """Classify a node; None when its colons are not ours to check."""
        if isinstance(node, (nodes.Dict, nodes.DictComp)):
            return ConstructKind.PROPERTY_ASSIGNMENT
        if isinstance(node, nodes.MatchMapping):
            return ConstructKind.BINDING_ELEMENT
        return None

    def colon_sites(self, node: nodes.NodeNG, source: SourceText) -> tuple[ColonSite, ...]:
        """One site per explicit colon, in source order."""
        kind = self.construct_kind(node)
        if kind is None:
            return ()
        sites: list[ColonSite] = []
        for key, value in self._entries(node):
            site = self._site_for(kind, key, value, source)
            if site is not None:
                sites.append(site)
        return tuple(sites)

    def _entries(self, node: nodes.NodeNG) -> list[Entry]:
        """Key/value pairs written with a colon; ``**`` unpacking has none."""
        if isinstance(node, nodes.Dict):
            return [
                (key, value)
                for key, value in node.items
                if not isinstance(key, nodes.DictUnpack)
            ]
        if isinstance(node, nodes.DictComp):
            return [(node.key, node.value)]
        if isinstance(node, nodes.MatchMapping):
            return list(zip(node.keys, node.patterns))
        return []

    def _site_for(
        self,
        kind: ConstructKind,
        key: nodes.NodeNG,
        value: nodes.NodeNG,
        source: SourceText,
    ) -> Optional[ColonSite]:
        end_line = getattr(key, "end_lineno", None)
        end_col = getattr(key, "end_col_offset", None)
        if end_line is None or end_col is None:
            logger.debug("Key %r has no end position; colon skipped", key)
            return None
        after = source.offset_from_byte_column(end_line, end_col)

        before: Optional[int] = None
        if getattr(value, "lineno", None) is not None and getattr(value, "col_offset", None) is not None:
            before = source.offset_from_byte_column(value.lineno, value.col_offset)

        site = source.colon_site(kind, after, before)
        if site is None:
            logger.debug("No colon found after key at line %s", end_line)
        return site

    def parse_source(self, source: str, module_name: str = "") -> Optional[nodes.Module]:
        """Parse source text and return the astroid Module node."""
        try:
            # string_build keeps the text as-is (astroid.parse would dedent it).
            return AstroidBuilder(astroid.MANAGER).string_build(source, modname=module_name)
        except astroid.AstroidSyntaxError as exc:
            logger.warning("Skipping %s: %s", module_name or "<source>", exc)
            return None

    def read_module_source(self, module: nodes.Module) -> Optional[str]:
        """Return the text pylint parsed the module from."""
        try:
            stream = module.stream()
            if stream is None:
                return None
            with stream:
                data = stream.read()
        except OSError as exc:
            logger.warning("Could not read %s: %s", module.file, exc)
            return None
        if isinstance(data, str):
            return data
        if data.startswith(codecs.BOM_UTF8):
            data = data[len(codecs.BOM_UTF8):]
        try:
            return data.decode(module.file_encoding or "utf-8")
        except (UnicodeDecodeError, LookupError) as exc:
            logger.warning("Could not decode %s: %s", module.file, exc)
            return None
