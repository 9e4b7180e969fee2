"""SmartPOP 生产实绩系统

作业指示与生产实绩的集计报表引擎
"""

__version__ = "1.0.0"
