from .cli import cli

cli(prog_name="redis-availability-probe")
