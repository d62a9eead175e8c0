"""Service layer: presentation surfaces built on top of the provider layer.

Only the debugging CLI lives here. Provider packages never import from this
package.
"""
