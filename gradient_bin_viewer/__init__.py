"""Core logic for the Gradient Bin Viewer.

The Gradio UI lives in `app.py`. This package contains plain functions that:
- fetch a bin and pull out its gradient payload
- detect XML vs JSON payloads
- normalize both formats into one gradient document
- build the gradient descriptor and export the document as JSON
"""
