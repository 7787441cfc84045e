from git_recent.cli import cli

cli(prog_name="git-recent")
