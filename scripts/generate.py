"""
generate.py builds the attribute reference (docs/attributes.md) from the
attribute specification bundled with dotgraph.

Usage: python -m scripts.generate
"""

import os
from typing import Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, Template

import config as cfg
from dotgraph import config as cfg_dot
from dotgraph import schema
from . import doc_root_dir, template_dir


def load_tmpl(tmpl: str) -> Template:
    env = Environment(loader=FileSystemLoader(template_dir()), keep_trailing_newline=True)
    env.filters["type_name"] = type_name
    return env.get_template(tmpl)


def type_name(typ: type) -> str:
    return cfg.TYPE_NAMES.get(typ, typ.__name__)


def accessor(name: str) -> Optional[str]:
    """Returns the generated setter for an attribute, e.g. setFontsize for fontsize.

    Accessors lower case the first letter of the attribute, so names starting
    with a capital are only reachable through a key alias (setUrl for URL).
    None when no accessor stores the attribute under its own name.
    """
    for key, alias in cfg_dot.KEY_ALIASES.items():
        if alias == name:
            name = key
            break
    if name[:1] != name[:1].lower():
        return None
    return "set" + name[:1].upper() + name[1:]


def gen_apidoc() -> str:
    """Generate the attribute reference grouped by element kind."""
    tmpl = load_tmpl(cfg.TMPL_APIDOC)
    specs = schema.load()

    kind_attrs: Dict[str, List[dict]] = {}
    for kind in cfg.KINDS:
        kind_attrs[kind] = []
        for key in sorted(schema.attributes_for(kind)):
            spec = specs[key]
            kind_attrs[kind].append(
                {
                    "name": spec.name,
                    "type": spec.type,
                    "xsd_type": spec.xsd_type,
                    "accessor": accessor(spec.name),
                }
            )
    return tmpl.render(app=cfg.APP_NAME, kind_attrs=kind_attrs)


def make_apidoc(content: str) -> str:
    """Create the api documentation file"""
    os.makedirs(doc_root_dir(), exist_ok=True)
    doc_path = os.path.join(doc_root_dir(), cfg.FILE_APIDOC)
    with open(doc_path, "w+", encoding="utf-8") as f:
        f.write(content)
    return doc_path


def generate() -> str:
    return make_apidoc(gen_apidoc())


if __name__ == "__main__":
    print(generate())
