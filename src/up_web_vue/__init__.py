"""up-web-vue — interactive scaffolding front end for web projects.

Asks for a project name and overwrite permission, then hands a
decision object to the template materialisation step.
"""

from up_web_vue.version import __version__

__all__: list[str] = ["__version__"]
