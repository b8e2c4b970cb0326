"""Task view model for build tools.

Projects a build's nested project/task model into a navigable tree
for a generic tree display (elements, children, has_children, parent).
"""

__version__ = "0.1.0"
