'''
Command line interface tests
'''

from rpnexpr.cli import CLI

from pytest import raises


def run(*args):
    cli = CLI()
    cli.run(args=list(args))
    return cli


def test_expression(capsys):
    run('-e', '3 4 +')
    assert capsys.readouterr().out == '3 + 4\n= 7\n'


def test_each_line_shown(capsys):
    run('-e', '2', 'pi *', '', '1 /')
    assert capsys.readouterr().out.splitlines() == [
        '2',
        '= 2',
        '2 × π',
        '= 6.283185307179586',
        '2 × π ÷ 1',
        '= 6.283185307179586',
    ]


def test_unresolved_shows_no_result(capsys):
    run('-e', 'x 1 +')
    assert capsys.readouterr().out == 'x + 1\n'


def test_variables(capsys):
    run('-V', 'x=2.5', '-V', 'y = 1,000', '-e', 'x y +')
    assert capsys.readouterr().out == 'x + y\n= 1,002.5\n'


def test_bad_variable(capsys):
    with raises(SystemExit) as e:
        run('-V', 'x', '-e', 'x')
    assert e.value.code == 2
    assert 'Bad variable binding x' in capsys.readouterr().err


def test_bad_variable_value(capsys):
    with raises(SystemExit):
        run('-V', 'x=abc', '-e', 'x')
    assert 'Bad variable binding x=abc' in capsys.readouterr().err


def test_infinite_result(capsys):
    run('-e', '1 0 /')
    assert capsys.readouterr().out == '1 ÷ 0\n= inf\n'


def test_lex_error_keeps_going(capsys):
    run('-e', '1 2 @ +', '3 +')
    captured = capsys.readouterr()
    assert "Couldn't lex @ +" in captured.err
    assert captured.out.splitlines() == ['2, 1', '= 2', '2 + 3, 1', '= 5']


def test_clear(capsys):
    run('-e', '1 2 +', 'clear')
    assert capsys.readouterr().out.splitlines()[-1] == '...'


def test_graph(capsys):
    run('-g', '-1', '2', '1', '-e', '1 x /')
    assert capsys.readouterr().out.splitlines() == [
        '1 ÷ x',
        'y = 1 ÷ x',
        '-1\t-1',
        '',
        '1\t1',
    ]


def test_graph_bad_step(capsys):
    with raises(SystemExit):
        run('-g', '0', '1', '0', '-e', 'x')
    assert 'STEP must be positive' in capsys.readouterr().err


def test_dump(capsys):
    run('-D', '-e', '3 sin')
    assert capsys.readouterr().out.splitlines() == [
        '[groups]\t<repr(lexeme)>',
        "number\t'3'",
        "space\t' '",
        "operator\t'sin'",
    ]


def test_raw_grammar(capsys):
    run('-G', '-e')
    assert '(?<operator>' in capsys.readouterr().out


def test_given_calculator(capsys):
    cli = CLI()
    cli.calculator.push_value(5)
    cli.run(args=['-e', '2 *'])
    assert capsys.readouterr().out == '5 × 2\n= 10\n'


def test_graph_non_finite_range(capsys):
    for bounds in ('nan', '1'), ('0', 'inf'):
        with raises(SystemExit) as e:
            run('-g', *bounds, '1', '-e', 'x')
        assert e.value.code == 2
        assert 'START and STOP must be finite' in capsys.readouterr().err


def test_graph_only_when_executing(capsys):
    with raises(SystemExit):
        run('-g', '0', '1', '1', '-D', '-e', 'x')
    assert "-g can't be combined with -D or -G" in capsys.readouterr().err
