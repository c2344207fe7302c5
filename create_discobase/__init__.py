"""create-discobase -- interactive project generator for DiscoBase Discord bots.

The Core Edition is generated entirely from templates bundled with this
package.  The Source Edition copies the full ``create-discobase`` template
tree, which is not shipped with the package: point
``DISCOBASE_SOURCE_TEMPLATE_DIR`` at a checkout of it before choosing that
edition.
"""

__version__ = "3.0.0"
