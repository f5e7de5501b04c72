from dsprofile.managers.manager import DataProfiler as DataProfiler

__all__ = ["DataProfiler"]
