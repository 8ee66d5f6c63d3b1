from highlow.ui.cli import main

main(prog_name='highlow')
