"""GUI package - notebook helpers built on ipywidgets.

Entry point:
    from d3venn.gui.diagnostics_log import DiagnosticsLog
    log = DiagnosticsLog(title="Venn input")
    log.show_result(validate(df))
    display(log.panel)
"""
