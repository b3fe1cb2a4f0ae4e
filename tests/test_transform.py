from minigin.transform import Transform, Vec3


def test_default_position_is_origin():
    assert Transform().position == Vec3(0.0, 0.0, 0.0)


def test_set_position_all_components():
    t = Transform()
    t.set_position(1.5, -2.0, 3.25)
    assert t.position == Vec3(1.5, -2.0, 3.25)
    assert (t.position.x, t.position.y, t.position.z) == (1.5, -2.0, 3.25)


def test_set_position_z_defaults_to_zero():
    t = Transform()
    t.set_position(4.0, 5.0, 9.0)
    t.set_position(7.0, 8.0)
    assert t.position == Vec3(7.0, 8.0, 0.0)


def test_position_can_be_assigned_as_vector():
    t = Transform()
    t.position = Vec3(1.0, 2.0, 3.0)
    assert t.position.z == 3.0


def test_transforms_do_not_share_position():
    a = Transform()
    b = Transform()
    a.set_position(10, 20)
    assert b.position == Vec3()