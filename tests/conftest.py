from pytest import Item, fixture

from calcbrain.brain import CalculatorBrain
from calcbrain.cli import CLI


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Use with pytest -rP and enable_assertion_pass_hook.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def brain():
    return CalculatorBrain()


@fixture
def run_cli(capsys):
    '''
    Run the CLI on expression lines and return the lines it printed.
    '''
    def run(*lines, options=()):
        CLI().run(args=[*options, '-e', *lines])
        return capsys.readouterr().out.splitlines()
    return run
