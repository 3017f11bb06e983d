"""Tests for room long descriptions."""

from zuul.game.world import Actor, Item, Room


class TestLongDescription:
    """Test the prose rendering of a room."""

    def test_empty_room(self, kitchen):
        """Test a room with nothing in it."""
        assert kitchen.get_long_description() == "You are a kitchen.\nExits:"

    def test_plural_item_without_description(self, kitchen, apples, hallway):
        """Test plural wording and no extra clause for a blank description."""
        kitchen.add_item(apples)
        kitchen.set_exit("north", hallway)

        assert kitchen.get_long_description() == (
            "You are a kitchen.\nThere are apples laying around.\nExits: north"
        )

    def test_singular_item_with_description(self, kitchen, sword):
        """Test singular wording followed by the item description."""
        kitchen.add_item(sword)

        assert "There is a(n) sword laying around. shiny.\n" in kitchen.get_long_description()

    def test_whitespace_description_is_blank(self, kitchen):
        """Test that a whitespace-only description is treated as empty."""
        kitchen.add_item(Item(name="rock", description="   "))

        assert kitchen.get_long_description() == (
            "You are a kitchen.\nThere is a(n) rock laying around.\nExits:"
        )

    def test_non_breaking_space_is_not_blank(self, kitchen):
        """Test that only control characters and spaces count as blank."""
        kitchen.add_item(Item(name="rock", description="\u00a0"))

        assert kitchen.get_long_description() == (
            "You are a kitchen.\nThere is a(n) rock laying around. \u00a0.\nExits:"
        )

    def test_control_characters_are_blank(self, kitchen):
        """Test that a description of tabs and newlines is treated as empty."""
        kitchen.add_item(Item(name="rock", description="\t\n\x00"))

        assert "There is a(n) rock laying around.\n" in kitchen.get_long_description()

    def test_zero_count_uses_plural_wording(self, kitchen):
        """Test that any count other than one is described as plural."""
        kitchen.add_item(Item(name="coins", count=0))

        assert "There are coins laying around.\n" in kitchen.get_long_description()

    def test_items_in_insertion_order(self, kitchen, apples, sword):
        """Test that items are listed in the order they were added."""
        kitchen.add_item(sword)
        kitchen.add_item(apples)

        description = kitchen.get_long_description()
        assert description.index("sword") < description.index("apples")

    def test_actor_with_description(self, kitchen, goblin):
        """Test the actor line with a description."""
        kitchen.set_actor(goblin)

        assert kitchen.get_long_description() == (
            "You are a kitchen.\nA(n) Goblin is in the room. It looks hungry.\nExits:"
        )

    def test_actor_without_description(self, kitchen):
        """Test the actor line keeps its trailing space when there is no description."""
        kitchen.set_actor(Actor(name="Troll"))

        assert kitchen.get_long_description() == (
            "You are a kitchen.\nA(n) Troll is in the room. \nExits:"
        )

    def test_full_room(self):
        """Test a room with items, actors and several exits."""
        pub = Room("in the campus pub")
        outside = Room("outside the main entrance of the university")
        cellar = Room("in the cellar", is_trapdoor=True)

        pub.add_item(Item(name="mugs", count=4))
        pub.add_item(Item(name="dartboard", description="Somebody missed a lot"))
        pub.set_actor(Actor(name="Goblin", description="It looks hungry."))
        pub.set_actor(Actor(name="Barkeep"))
        pub.set_exit("east", outside)
        pub.set_exit("down", cellar)

        assert pub.get_long_description() == (
            "You are in the campus pub.\n"
            "There are mugs laying around.\n"
            "There is a(n) dartboard laying around. Somebody missed a lot.\n"
            "A(n) Goblin is in the room. It looks hungry.\n"
            "A(n) Barkeep is in the room. \n"
            "Exits: east down"
        )

    def test_actor_order_after_move(self, kitchen, hallway):
        """Test that an actor moved away and back is listed last."""
        kitchen.set_actor(Actor(name="Goblin"))
        kitchen.set_actor(Actor(name="Troll"))

        kitchen.move_actor("Goblin", hallway)
        hallway.move_actor("Goblin", kitchen)

        names = [actor.name for actor in kitchen.get_actors()]
        assert names == ["Troll", "Goblin"]

    def test_description_reflects_changes(self, kitchen, sword):
        """Test that the description is rendered from current state."""
        kitchen.add_item(sword)
        kitchen.remove_item(sword)
        kitchen.set_description("a scullery")

        assert kitchen.get_long_description() == "You are a scullery.\nExits:"
