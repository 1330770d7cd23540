"""Document Tree Constants

This module defines the namespace URIs, node kinds and name tables used while
converting parse trees. Tables are plain lists and dicts so that iteration
order stays stable and lookups stay cheap.

Usage:
    from turbohast.constants import SVG_NAMESPACE, SVG_CASE_SENSITIVE_ELEMENTS

References:
    - https://infra.spec.whatwg.org/#namespaces
    - https://html.spec.whatwg.org/multipage/parsing.html#adjust-svg-attributes
"""

# Namespace URIs
HTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
MATHML_NAMESPACE = "http://www.w3.org/1998/Math/MathML"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
XMLNS_NAMESPACE = "http://www.w3.org/2000/xmlns/"

# Source node kinds
KIND_DOCUMENT = "document"
KIND_FRAGMENT = "fragment"
KIND_TEXT = "text"
KIND_COMMENT = "comment"
KIND_DOCTYPE = "doctype"
KIND_ELEMENT = "element"

# Document modes that count as quirks mode
QUIRKS_MODES = ("quirks", "limited-quirks")

CDATA_OPEN = "[CDATA["
CDATA_CLOSE = "]]"

SVG_CASE_SENSITIVE_ELEMENTS = {
    "foreignobject": "foreignObject",
    "animatemotion": "animateMotion",
    "animatetransform": "animateTransform",
    "clippath": "clipPath",
    "feblend": "feBlend",
    "fecolormatrix": "feColorMatrix",
    "fecomponenttransfer": "feComponentTransfer",
    "fecomposite": "feComposite",
    "feconvolvematrix": "feConvolveMatrix",
    "fediffuselighting": "feDiffuseLighting",
    "fedisplacementmap": "feDisplacementMap",
    "fedistantlight": "feDistantLight",
    "fedropshadow": "feDropShadow",
    "feflood": "feFlood",
    "fefunca": "feFuncA",
    "fefuncb": "feFuncB",
    "fefuncg": "feFuncG",
    "fefuncr": "feFuncR",
    "fegaussianblur": "feGaussianBlur",
    "feimage": "feImage",
    "femergenode": "feMergeNode",
    "femorphology": "feMorphology",
    "feoffset": "feOffset",
    "fepointlight": "fePointLight",
    "fespecularlighting": "feSpecularLighting",
    "fespotlight": "feSpotLight",
    "fetile": "feTile",
    "feturbulence": "feTurbulence",
    "lineargradient": "linearGradient",
    "radialgradient": "radialGradient",
    "textpath": "textPath",
    "altglyph": "altGlyph",
    "altglyphdef": "altGlyphDef",
    "altglyphitem": "altGlyphItem",
    "animatecolor": "animateColor",
    "femerge": "feMerge",
    "glyphref": "glyphRef",
}

# SVG attributes that should have their case preserved
SVG_CASE_SENSITIVE_ATTRIBUTES = {
    "attributename": "attributeName",
    "attributetype": "attributeType",
    "basefrequency": "baseFrequency",
    "baseprofile": "baseProfile",
    "calcmode": "calcMode",
    "clippathunits": "clipPathUnits",
    "diffuseconstant": "diffuseConstant",
    "edgemode": "edgeMode",
    "filterunits": "filterUnits",
    "glyphref": "glyphRef",
    "gradienttransform": "gradientTransform",
    "gradientunits": "gradientUnits",
    "kernelmatrix": "kernelMatrix",
    "kernelunitlength": "kernelUnitLength",
    "keypoints": "keyPoints",
    "keysplines": "keySplines",
    "keytimes": "keyTimes",
    "lengthadjust": "lengthAdjust",
    "limitingconeangle": "limitingConeAngle",
    "markerheight": "markerHeight",
    "markerunits": "markerUnits",
    "markerwidth": "markerWidth",
    "maskcontentunits": "maskContentUnits",
    "maskunits": "maskUnits",
    "numoctaves": "numOctaves",
    "pathlength": "pathLength",
    "patterncontentunits": "patternContentUnits",
    "patterntransform": "patternTransform",
    "patternunits": "patternUnits",
    "pointsatx": "pointsAtX",
    "pointsaty": "pointsAtY",
    "pointsatz": "pointsAtZ",
    "preservealpha": "preserveAlpha",
    "preserveaspectratio": "preserveAspectRatio",
    "primitiveunits": "primitiveUnits",
    "refx": "refX",
    "refy": "refY",
    "repeatcount": "repeatCount",
    "repeatdur": "repeatDur",
    "requiredextensions": "requiredExtensions",
    "requiredfeatures": "requiredFeatures",
    "specularconstant": "specularConstant",
    "specularexponent": "specularExponent",
    "spreadmethod": "spreadMethod",
    "startoffset": "startOffset",
    "stddeviation": "stdDeviation",
    "stitchtiles": "stitchTiles",
    "surfacescale": "surfaceScale",
    "systemlanguage": "systemLanguage",
    "tablevalues": "tableValues",
    "targetx": "targetX",
    "targety": "targetY",
    "textlength": "textLength",
    "viewbox": "viewBox",
    "viewtarget": "viewTarget",
    "xchannelselector": "xChannelSelector",
    "ychannelselector": "yChannelSelector",
    "zoomandpan": "zoomAndPan",
}

# SVG presentation attributes written with dashes (stroke-width -> strokeWidth)
SVG_DASHED_ATTRIBUTES = [
    "alignment-baseline",
    "baseline-shift",
    "clip-path",
    "clip-rule",
    "color-interpolation",
    "color-interpolation-filters",
    "color-profile",
    "color-rendering",
    "dominant-baseline",
    "enable-background",
    "fill-opacity",
    "fill-rule",
    "flood-color",
    "flood-opacity",
    "font-family",
    "font-size",
    "font-size-adjust",
    "font-stretch",
    "font-style",
    "font-variant",
    "font-weight",
    "glyph-orientation-horizontal",
    "glyph-orientation-vertical",
    "image-rendering",
    "letter-spacing",
    "lighting-color",
    "marker-end",
    "marker-mid",
    "marker-start",
    "paint-order",
    "pointer-events",
    "shape-rendering",
    "stop-color",
    "stop-opacity",
    "stroke-dasharray",
    "stroke-dashoffset",
    "stroke-linecap",
    "stroke-linejoin",
    "stroke-miterlimit",
    "stroke-opacity",
    "stroke-width",
    "text-anchor",
    "text-decoration",
    "text-rendering",
    "unicode-bidi",
    "vector-effect",
    "word-spacing",
    "writing-mode",
]

# Property names whose attribute is the lowercased property name
HTML_PROPERTIES = [
    "abbr",
    "accept",
    "accessKey",
    "action",
    "allow",
    "allowFullScreen",
    "alt",
    "async",
    "autoCapitalize",
    "autoComplete",
    "autoFocus",
    "autoPlay",
    "charSet",
    "checked",
    "cite",
    "cols",
    "colSpan",
    "content",
    "contentEditable",
    "controls",
    "coords",
    "crossOrigin",
    "data",
    "dateTime",
    "decoding",
    "default",
    "defer",
    "dir",
    "dirName",
    "disabled",
    "download",
    "draggable",
    "encType",
    "enterKeyHint",
    "form",
    "formAction",
    "formEncType",
    "formMethod",
    "formNoValidate",
    "formTarget",
    "headers",
    "height",
    "hidden",
    "high",
    "href",
    "hrefLang",
    "id",
    "inert",
    "inputMode",
    "integrity",
    "is",
    "itemId",
    "itemProp",
    "itemRef",
    "itemScope",
    "itemType",
    "kind",
    "label",
    "lang",
    "language",
    "list",
    "loading",
    "loop",
    "low",
    "manifest",
    "max",
    "maxLength",
    "media",
    "method",
    "min",
    "minLength",
    "multiple",
    "muted",
    "name",
    "nonce",
    "noModule",
    "noValidate",
    "open",
    "optimum",
    "pattern",
    "ping",
    "placeholder",
    "playsInline",
    "popover",
    "poster",
    "preload",
    "readOnly",
    "referrerPolicy",
    "rel",
    "required",
    "reversed",
    "rows",
    "rowSpan",
    "sandbox",
    "scope",
    "scoped",
    "seamless",
    "selected",
    "shape",
    "size",
    "sizes",
    "slot",
    "span",
    "spellCheck",
    "src",
    "srcDoc",
    "srcLang",
    "srcSet",
    "start",
    "step",
    "style",
    "tabIndex",
    "target",
    "title",
    "translate",
    "type",
    "typeMustMatch",
    "useMap",
    "value",
    "width",
    "wrap",
]

# Properties whose attribute is not derivable from the property name
HTML_ATTRIBUTE_OVERRIDES = {
    "acceptCharset": "accept-charset",
    "className": "class",
    "htmlFor": "for",
    "httpEquiv": "http-equiv",
}

SVG_ATTRIBUTE_OVERRIDES = {
    "className": "class",
}

# Plain lowercase svg attributes
SVG_PROPERTIES = [
    "by",
    "color",
    "cursor",
    "cx",
    "cy",
    "d",
    "direction",
    "display",
    "dx",
    "dy",
    "fill",
    "filter",
    "from",
    "fr",
    "fx",
    "fy",
    "height",
    "href",
    "id",
    "in",
    "in2",
    "lang",
    "mask",
    "offset",
    "opacity",
    "operator",
    "orient",
    "overflow",
    "path",
    "points",
    "r",
    "rotate",
    "rx",
    "ry",
    "scale",
    "stroke",
    "style",
    "tabIndex",
    "to",
    "transform",
    "type",
    "values",
    "version",
    "visibility",
    "width",
    "x",
    "x1",
    "x2",
    "y",
    "y1",
    "y2",
]

XLINK_PROPERTIES = [
    "xLinkActuate",
    "xLinkArcRole",
    "xLinkHref",
    "xLinkRole",
    "xLinkShow",
    "xLinkTitle",
    "xLinkType",
]

XML_PROPERTIES = ["xmlBase", "xmlLang", "xmlSpace"]

XMLNS_ATTRIBUTES = {
    "xmlns": "xmlns",
    "xmlnsXLink": "xmlns:xlink",
}

ARIA_PROPERTIES = [
    "ariaActiveDescendant",
    "ariaAtomic",
    "ariaAutoComplete",
    "ariaBusy",
    "ariaChecked",
    "ariaColCount",
    "ariaColIndex",
    "ariaColSpan",
    "ariaControls",
    "ariaCurrent",
    "ariaDescribedBy",
    "ariaDetails",
    "ariaDisabled",
    "ariaDropEffect",
    "ariaErrorMessage",
    "ariaExpanded",
    "ariaFlowTo",
    "ariaGrabbed",
    "ariaHasPopup",
    "ariaHidden",
    "ariaInvalid",
    "ariaKeyShortcuts",
    "ariaLabel",
    "ariaLabelledBy",
    "ariaLevel",
    "ariaLive",
    "ariaModal",
    "ariaMultiLine",
    "ariaMultiSelectable",
    "ariaOrientation",
    "ariaOwns",
    "ariaPlaceholder",
    "ariaPosInSet",
    "ariaPressed",
    "ariaReadOnly",
    "ariaRelevant",
    "ariaRequired",
    "ariaRoleDescription",
    "ariaRowCount",
    "ariaRowIndex",
    "ariaRowSpan",
    "ariaSelected",
    "ariaSetSize",
    "ariaSort",
    "ariaValueMax",
    "ariaValueMin",
    "ariaValueNow",
    "ariaValueText",
    "role",
]
