"""Embedded CSS for rendered documents.

Each wrapper class gets its own stylesheet so a rendered fragment looks the
same wherever it is pasted.
"""

TABLE_CONTAINER_CLASS = "xml-table-container"
SEMANTIC_CONTAINER_CLASS = "semantic-xml-content"

# Table root documents: fully bordered cells
TABLE_STYLE = """
.xml-table-container { font-family: system-ui, sans-serif; }
.table { width: 100%; border-collapse: collapse; margin-bottom: 1rem; }
.table th, .table td { padding: 0.75rem; text-align: left; border: 1px solid #e2e8f0; }
.table th { font-weight: 600; background-color: #f8fafc; }
.table-responsive { overflow-x: auto; }
.table tr:nth-child(even) { background-color: #f8fafc; }
"""

# Record-style documents: row separators only
TABULAR_STYLE = """
.xml-table-container { font-family: system-ui, sans-serif; }
.table { width: 100%; border-collapse: collapse; margin-bottom: 1rem; }
.table th, .table td { padding: 0.75rem; text-align: left; border-bottom: 1px solid #e2e8f0; }
.table th { font-weight: 600; background-color: #f8fafc; }
.table-responsive { overflow-x: auto; }
.table tr:nth-child(even) { background-color: #f8fafc; }
"""

SEMANTIC_STYLE = """
.semantic-xml-content { font-family: system-ui, sans-serif; line-height: 1.5; }
.xml-title, .xml-h1 { font-size: 2rem; font-weight: bold; margin-bottom: 1rem; }
.xml-subtitle, .xml-h2 { font-size: 1.5rem; font-weight: bold; margin-bottom: 0.75rem; }
.xml-heading, .xml-h3 { font-size: 1.25rem; font-weight: bold; margin-bottom: 0.5rem; }
.xml-paragraph, .xml-p { margin-bottom: 1rem; }
.xml-list { list-style-type: disc; padding-left: 1.5rem; margin-bottom: 1rem; }
.xml-item { margin-bottom: 0.5rem; }
.xml-link { color: #0077cc; text-decoration: underline; }
.xml-image { max-width: 100%; height: auto; }
.xml-section { margin-bottom: 2rem; padding: 1rem; border: 1px solid #e2e8f0; border-radius: 0.25rem; }
.xml-content, .xml-div { margin-bottom: 1rem; }
.xml-article { border-bottom: 1px solid #e2e8f0; padding-bottom: 1rem; margin-bottom: 1rem; }
.xml-button { padding: 0.5rem 1rem; background-color: #f1f5f9; border: 1px solid #94a3b8; border-radius: 0.25rem; }
"""
