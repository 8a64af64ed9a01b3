from isoghost.core.utils import iso_project, sign, STEP_X, STEP_Y


def test_origin():
    assert iso_project(0, 0) == (0, 0)


def test_axes_run_diagonally():
    # one step in x goes down-right, one step in y goes down-left
    assert iso_project(1, 0) == (STEP_X / 2, STEP_Y / 2)
    assert iso_project(0, 1) == (-STEP_X / 2, STEP_Y / 2)


def test_same_row_on_screen():
    assert iso_project(3, 3)[0] == 0
    assert iso_project(2, 4)[1] == iso_project(4, 2)[1]


def test_sign():
    assert [sign(-5), sign(0), sign(3)] == [-1, 0, 1]
