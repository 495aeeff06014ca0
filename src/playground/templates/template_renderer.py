"""Render the Jinja2 templates bundled next to playground modules."""

import jinja2


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Render *template_name* from the ``templates`` directory of *package*.

    Block tags leave no blank lines behind and the file's final newline is
    kept, so Swift and XML templates render byte-for-byte as written. Every
    variable the template uses must be passed in.

    Raises:
        jinja2.TemplateNotFound: If *package* bundles no such template
        jinja2.UndefinedError: If a template variable was not supplied
    """
    environment = jinja2.Environment(
        loader=jinja2.PackageLoader(package, "templates"),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
        autoescape=False,
    )
    return environment.get_template(template_name).render(**kwargs)
