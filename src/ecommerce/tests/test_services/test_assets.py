import logging

import pytest

from ecommerce.exceptions import BadRequestError
from ecommerce.services import LocalAssetStorage


@pytest.fixture
def storage(tmp_path) -> LocalAssetStorage:
    (tmp_path / "temp").mkdir()
    return LocalAssetStorage(tmp_path)


@pytest.mark.asyncio
class TestLocalAssetStorage:
    """
    Tests for LocalAssetStorage against a temporary root directory.

    Fixtures:
        - storage: LocalAssetStorage rooted at pytest's tmp_path, with an empty temp/ folder
    """

    async def test_move_into_folder(self, storage, tmp_path):
        """
        Behavior:
            The upload leaves temp/ and lands in the entity folder under a new
            name that keeps the file extension.
        """
        (tmp_path / "temp" / "logo.png").write_bytes(b"png")

        stored = await storage.move("temp/logo.png", "brands")

        folder, name = stored.split("/")
        assert folder == "brands"
        assert name.endswith(".png") and name != "logo.png"
        assert (tmp_path / "brands" / name).read_bytes() == b"png"
        assert not (tmp_path / "temp" / "logo.png").exists()

    async def test_same_file_name_from_two_uploads(self, storage, tmp_path):
        """
        Behavior:
            Two uploads named logo.png get different stored paths and both files survive.
        Importance:
            A shared path would let one brand's update delete another brand's logo.
        """
        (tmp_path / "temp" / "logo.png").write_text("brand A")
        first = await storage.move("temp/logo.png", "brands")
        (tmp_path / "temp" / "logo.png").write_text("brand B")
        second = await storage.move("temp/logo.png", "brands")

        assert first != second
        assert (tmp_path / first).read_text() == "brand A"
        assert (tmp_path / second).read_text() == "brand B"

        await storage.delete(first)

        assert (tmp_path / second).read_text() == "brand B"

    async def test_already_stored_reference_is_kept(self, storage, tmp_path):
        (tmp_path / "brands").mkdir()
        (tmp_path / "brands" / "kept.png").write_bytes(b"k")

        assert await storage.move("brands/kept.png", "brands") == "brands/kept.png"
        assert (tmp_path / "brands" / "kept.png").exists()

    async def test_leading_slash_is_relative_to_root(self, storage, tmp_path):
        (tmp_path / "temp" / "a.png").write_bytes(b"a")

        stored = await storage.move("/temp/a.png", "products")

        assert stored.startswith("products/")
        assert (tmp_path / stored).read_bytes() == b"a"

    async def test_missing_upload_is_bad_request(self, storage):
        with pytest.raises(BadRequestError):
            await storage.move("temp/nope.png", "brands")

    async def test_escaping_reference_is_bad_request(self, storage, tmp_path):
        """
        Behavior:
            A reference that climbs out of the root is rejected and the outside file is untouched.
        """
        outside = tmp_path.parent / "secret.txt"
        outside.write_text("x")
        with pytest.raises(BadRequestError):
            await storage.move("../secret.txt", "brands")
        assert outside.exists()

    async def test_delete(self, storage, tmp_path):
        (tmp_path / "brands").mkdir()
        target = tmp_path / "brands" / "old.png"
        target.write_bytes(b"old")

        await storage.delete("brands/old.png")

        assert not target.exists()

    async def test_delete_missing_file_is_quiet(self, storage):
        await storage.delete("brands/never-existed.png")

    async def test_delete_outside_root_is_ignored(self, storage, tmp_path, caplog):
        outside = tmp_path.parent / "keep.txt"
        outside.write_text("x")

        with caplog.at_level(logging.WARNING):
            await storage.delete("../keep.txt")

        assert outside.exists()
