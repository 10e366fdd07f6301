import sys

import psutil
from loguru import logger


class JobTable:
    """Background jobs: pid -> (Popen, command string)"""

    def __init__(self):
        self.jobs = {}

    def __len__(self):
        return len(self.jobs)

    def __contains__(self, pid):
        return pid in self.jobs

    def add(self, proc, cmdline):
        """Register a background job and announce it"""
        self.jobs[proc.pid] = (proc, cmdline)
        print(f"[{proc.pid}] started in background: {cmdline}", flush=True)

    def reap(self):
        """
        Collect background jobs that have finished, without blocking.
        Returns: list of reaped pids
        """
        reaped = []
        for pid, (proc, cmdline) in list(self.jobs.items()):
            code = proc.poll()
            if code is None:
                continue

            del self.jobs[pid]
            reaped.append(pid)
            logger.debug("reaped background job {} with status {}", pid, code)

            if code != 0:
                print(f"[{pid}] finished: {cmdline} (exit {code})", flush=True)
            else:
                print(f"[{pid}] finished: {cmdline}", flush=True)
        return reaped

    def describe(self):
        """
        Report every tracked job with its OS-level status.
        Returns: list of (pid, cmdline, status)
        """
        rows = []
        for pid, (_, cmdline) in self.jobs.items():
            try:
                if psutil.pid_exists(pid):
                    status = psutil.Process(pid).status()
                else:
                    status = "terminated"
            except psutil.NoSuchProcess:
                status = "terminated"
            except psutil.AccessDenied:
                status = "unknown"
            rows.append((pid, cmdline, status))
        return rows

    def cleanup(self):
        """Reap what has finished and report jobs left running on exit"""
        self.reap()
        for pid, cmdline, status in self.describe():
            print(f"[{pid}] still running: {cmdline} [{status}]", file=sys.stderr)
