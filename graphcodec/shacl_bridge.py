"""SHACL Bridge — translates a schema into SHACL shapes.

The codec itself only checks that required properties are present while
building. This bridge expresses the same schema as SHACL so a graph can be
checked after the fact, e.g. one received from elsewhere:

  1. Each definition → sh:NodeShape targeting the definition's class URI
  2. Each effective property → property shape on the property URI:
       required           → sh:minCount 1
       single-valued      → sh:maxCount 1
       uuid               → sh:nodeKind sh:IRI
       resource           → sh:nodeKind sh:BlankNodeOrIRI
       other literal      → sh:nodeKind sh:Literal
       single resource    → sh:class of the declared type
  3. Graph validation via pySHACL, results reported per type and property key

Array properties carry no sh:maxCount: they may be one list node or
repeated triples. Multi-type and array-valued resource properties carry no
sh:class: their values are list nodes or instances of a type picked at
build time.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rdflib import BNode, Graph, Literal, Namespace, RDF, RDFS, URIRef
from rdflib.namespace import SH

from .literals import UUID_KEY
from .resolver import resolve_properties, resolve_uris
from .schema import SchemaRegistry
from .types import PropertyCache


# ---------------------------------------------------------------------------
# Namespace for generated shapes
# ---------------------------------------------------------------------------

SHAPES = Namespace("http://graphcodec.example.org/shapes/")


# ---------------------------------------------------------------------------
# Schema → SHACL Shapes
# ---------------------------------------------------------------------------

def schema_to_shacl(registry: SchemaRegistry) -> Graph:
    """Translate a SchemaRegistry into a SHACL shapes graph.

    Inherited properties are included in each subtype's shape, with the
    subtype's own redeclarations taking precedence.
    """
    sg = Graph()
    sg.bind("sh", SH)
    sg.bind("shapes", SHAPES)

    cache = PropertyCache()
    for type_key in registry:
        shape_uri = SHAPES[f"{type_key}Shape"]

        sg.add((shape_uri, RDF.type, SH.NodeShape))
        sg.add((shape_uri, SH.targetClass, URIRef(registry.uri_for_type(type_key))))
        sg.add((shape_uri, RDFS.label, Literal(f"Shape for {type_key}")))

        for key, prop in resolve_properties(registry, type_key, cache).items():
            prop_shape = BNode()
            sg.add((shape_uri, SH.property, prop_shape))
            sg.add((prop_shape, SH.path, URIRef(prop.uri)))
            sg.add((prop_shape, SH.name, Literal(key)))

            if not prop.is_optional:
                sg.add((prop_shape, SH.minCount, Literal(1)))
            if not prop.is_array:
                sg.add((prop_shape, SH.maxCount, Literal(1)))

            if prop.is_literal:
                # Array items live on list nodes, so only scalars are kind-checked
                if not prop.is_array:
                    kind = SH.IRI if key == UUID_KEY else SH.Literal
                    sg.add((prop_shape, SH.nodeKind, kind))
                continue

            sg.add((prop_shape, SH.nodeKind, SH.BlankNodeOrIRI))
            if not prop.is_array and not prop.is_multi_type and prop.type in registry:
                sg.add((prop_shape, SH["class"], URIRef(registry.uri_for_type(prop.type))))

    return sg


# ---------------------------------------------------------------------------
# SHACL Validation
# ---------------------------------------------------------------------------

def shacl_validate(registry: SchemaRegistry, data_graph: Graph) -> ShapeReport:
    """Validate ``data_graph`` against the shapes generated from ``registry``.

    Each SHACL result is mapped back onto the schema: the focus node's
    registered type and the key of the property whose URI was the path.
    """
    from pyshacl import validate as pyshacl_validate

    conforms, results_graph, results_text = pyshacl_validate(
        data_graph,
        shacl_graph=schema_to_shacl(registry),
        inference="none",
        abort_on_first=False,
    )

    cache = PropertyCache()
    violations = []
    for result in results_graph.subjects(RDF.type, SH.ValidationResult):
        focus = results_graph.value(result, SH.focusNode)
        path = results_graph.value(result, SH.resultPath)

        type_key = None
        for cls in data_graph.objects(focus, RDF.type):
            type_key = registry.type_for_uri(cls)
            if type_key is not None:
                break
        property_key = None
        if type_key is not None and path is not None:
            property_key = resolve_uris(registry, type_key, cache).get(str(path))

        violations.append(PropertyViolation(
            node=str(focus),
            type_key=type_key,
            property_key=property_key,
            path=str(path) if path is not None else "",
            message=str(results_graph.value(result, SH.resultMessage) or ""),
            is_error=results_graph.value(result, SH.resultSeverity) == SH.Violation,
        ))

    violations.sort(key=lambda v: (v.node, v.path))
    return ShapeReport(conforms=conforms, violations=violations, report_text=results_text)


# ---------------------------------------------------------------------------
# Report types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PropertyViolation:
    """A shape violation located on a schema property.

    ``type_key`` and ``property_key`` are None when the focus node has no
    registered type or the path is not one of that type's properties.
    """
    node: str
    type_key: str | None
    property_key: str | None
    path: str
    message: str
    is_error: bool = True

    @property
    def where(self) -> str:
        type_key = self.type_key or "?"
        return f"{type_key}.{self.property_key or self.path or '?'}"

    def __str__(self) -> str:
        return f"{self.node} [{self.where}]: {self.message}"


@dataclass
class ShapeReport:
    """Outcome of validating a graph against schema-derived shapes."""
    conforms: bool
    violations: list[PropertyViolation] = field(default_factory=list)
    report_text: str = ""

    def for_property(self, type_key: str, property_key: str) -> list[PropertyViolation]:
        return [
            v for v in self.violations
            if v.type_key == type_key and v.property_key == property_key
        ]

    def summary(self) -> str:
        if self.conforms:
            return "Shapes: conforms"
        lines = [f"Shapes: {len(self.violations)} violation(s)"]
        lines.extend(f"  - {v}" for v in self.violations)
        return "\n".join(lines)
