"""Application Layer.

Services that project and edit a layout on behalf of a caller.
"""
