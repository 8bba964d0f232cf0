import logging

from hex_tiles import Axial, InMemoryScene, TileMap

# A small plateau with a step down on its east side.
heights = {Axial(0, 0): 2.0, Axial(0, 1): 2.0, Axial(1, 0): 0.5, Axial(1, -1): 2.0}


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    scene = InMemoryScene()
    tile_map = TileMap(scene, hex_width=2.0)

    for coord, elevation in heights.items():
        tile_map.create_and_add_tile(coord, elevation, material="basalt")

    for coord in tile_map.tiles.keys():
        tile = tile_map.tiles.get(coord)
        print(coord, scene.visual(tile.handle).position, tile.side_pieces)

    print("hit:", tile_map.quantize((1.4, 0.0, 0.9)))

    tile_map.try_removing_tile(Axial(1, 0))
    tile_map.hex_width = 3.0
    tile_map.regenerate_all_tiles()
    print("after removal:", {str(t.coord): t.side_pieces for t in tile_map.tiles.values()})
