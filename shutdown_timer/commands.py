# comandos do sistema operacional para desligar e cancelar
import logging
import subprocess

logger = logging.getLogger(__name__)


def build_shutdown_command(delay_seconds):
    if isinstance(delay_seconds, bool) or not isinstance(delay_seconds, int) or delay_seconds < 0:
        raise ValueError(f"delay must be a non-negative integer, got {delay_seconds!r}")
    return ["shutdown", "/s", "/t", str(delay_seconds)]


def build_abort_command():
    return ["shutdown", "/a"]


def _run(command, dry_run):
    if dry_run:
        logger.info("Dry run, not executing: %s", " ".join(command))
        return None
    logger.info("Executing: %s", " ".join(command))
    # erros ao iniciar o processo (OSError) sobem para quem chamou
    result = subprocess.run(command)
    if result.returncode:
        logger.warning("%s exited with status %d", command[0], result.returncode)
    else:
        logger.debug("%s exited with status 0", command[0])
    return result


# função de desligamento
def schedule_shutdown(delay_seconds, dry_run=False):
    return _run(build_shutdown_command(delay_seconds), dry_run)


# função de cancelamento
def cancel_shutdown(dry_run=False):
    return _run(build_abort_command(), dry_run)
