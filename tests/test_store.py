from mvp_creator.store import FileSystemDirectory


def test_package_name_from_source_root(source_root):
    path = source_root / "com" / "app" / "feature"
    path.mkdir(parents=True)

    assert FileSystemDirectory(path).package_name("java") == "com.app.feature"
    assert FileSystemDirectory(source_root).package_name("java") == ""


def test_package_name_without_marker(tmp_path):
    assert FileSystemDirectory(tmp_path).package_name("java") == ""


def test_package_name_with_custom_marker(tmp_path):
    path = tmp_path / "src" / "main" / "kotlin" / "org" / "demo"
    path.mkdir(parents=True)

    assert FileSystemDirectory(path).package_name("kotlin") == "org.demo"


def test_find_subdirectory(tmp_path):
    (tmp_path / "Base").mkdir()
    directory = FileSystemDirectory(tmp_path)

    assert directory.find_subdirectory("base").name == "Base"
    assert directory.find_subdirectory("base", ignore_case=False) is None
    assert directory.find_subdirectory("missing") is None


def test_has_file_is_exact(tmp_path):
    (tmp_path / "BluetoothModel.java").write_text("class BluetoothModel {}")
    (tmp_path / "folder.java").mkdir()
    directory = FileSystemDirectory(tmp_path)

    assert directory.has_file("BluetoothModel.java")
    assert not directory.has_file("bluetoothmodel.java")
    assert not directory.has_file("folder.java")


def test_create_file_writes_content(tmp_path):
    FileSystemDirectory(tmp_path).create_file("A.java", "class A {}\n")

    assert (tmp_path / "A.java").read_text(encoding="utf-8") == "class A {}\n"


def test_parent(tmp_path):
    child = tmp_path / "child"
    child.mkdir()

    assert FileSystemDirectory(child).parent == FileSystemDirectory(tmp_path)
