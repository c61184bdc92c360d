import pytest

from dsakit.demo import DEMOS, main, run_demo


def test_linked_list_demo_output():
    assert run_demo("linked-list") == "15->10->9->8->7->2->1->11->3->4->\n"


def test_stack_queues_demo_output():
    assert run_demo("stack-queues") == "4 10 3 1 5 "


def test_stack_stl_demo_output():
    assert run_demo("stack-stl") == "c f w b a "


def test_queue_demos_agree():
    assert run_demo("queue") == run_demo("queue-stl")


def test_stack_linked_and_vector_are_lifo_of_distinct_pushes():
    linked = run_demo("stack-linked").split()
    vector = run_demo("stack-vector").split()
    assert len(linked) == 5
    assert len(vector) == 5
    assert run_demo("stack-linked").endswith(" ")


def test_insert_at_bottom_relates_to_reverse():
    bottom = run_demo("insert-at-bottom").split()
    reversed_stack = run_demo("stack-reverse").split()
    assert bottom[-1] == "5"
    assert bottom[:-1] == reversed_stack[::-1]


def test_unknown_demo_raises():
    with pytest.raises(ValueError):
        run_demo("no-such-demo")


def test_main_prints_single_demo(capsys):
    assert main(["queue"]) == 0
    assert capsys.readouterr().out == run_demo("queue")


def test_main_runs_all_by_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "".join(run_demo(name) for name in DEMOS)


def test_main_rejects_unknown_name():
    with pytest.raises(SystemExit):
        main(["bogus"])