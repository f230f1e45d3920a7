from unittest import TestCase, TestSuite, TextTestRunner
import numpy as np

from rectswarm.brushes import MAX_BRUSHES
from rectswarm.scene import Scene, TIME_STEP, VELOCITY_SPREAD


class SceneConstructionTestCase(TestCase):

    def setUp(self):
        self.scene = Scene.random(1000,1000,1.0,100,seed=123456789)

    def test_buffer_sizes(self):
        '''12 points and 30 indices (10 triangles) per rect'''
        scene = self.scene
        self.assertEqual(scene.count,100)
        self.assertEqual(len(scene.mesh.points),1200)
        self.assertEqual(len(scene.mesh.style_refs),1200)
        self.assertEqual(len(scene.mesh.indices),3000)
        self.assertEqual(len(scene.positions),len(scene.velocities))
        self.assertEqual(len(scene.rects),100)

    def test_sampling_ranges(self):
        '''rects are small relative to the canvas and start inside it'''
        scene = self.scene
        self.assertTrue(np.all(scene.sizes >= 1000//32//4))
        self.assertTrue(np.all(scene.sizes < 1000//32))
        self.assertTrue(np.all(scene.positions >= 0))
        self.assertTrue(np.all(scene.positions < 1000-1000//32))
        self.assertTrue(np.all(np.abs(scene.velocities) <= VELOCITY_SPREAD/2 + 1e-6))

    def test_mesh_slices_follow_entity_order(self):
        '''entity i owns points 12*i .. 12*i+12'''
        scene = self.scene
        for i in (0,1,50,99):
            outline = scene.rect(i).outline(scene.positions[i],scene.stroke)
            self.assertTrue(np.allclose(scene.mesh.points[12*i:12*i+12],outline))
            self.assertEqual(scene.mesh.style_refs[12*i],scene.styles[i])

    def test_style_index_modulo(self):
        '''style indices cycle through the brush table'''
        scene = Scene.random(1000,1000,1.0,37,seed=1)
        rects = scene.rects
        self.assertEqual(rects[16].style_index,rects[0].style_index)
        self.assertEqual(rects[32].style_index,0)
        self.assertEqual(rects[36].style_index,36 % MAX_BRUSHES)

    def test_seed_reproduces_scene(self):
        other = Scene.random(1000,1000,1.0,100,seed=123456789)
        self.assertTrue(np.all(other.positions == self.scene.positions))
        self.assertTrue(np.all(other.mesh.points == self.scene.mesh.points))

    def test_invalid_construction(self):
        '''degenerate canvases and populations fail up front'''
        self.assertRaises(ValueError,Scene.random,0,1000,1.0,10)
        self.assertRaises(ValueError,Scene.random,1000,0,1.0,10)
        self.assertRaises(ValueError,Scene.random,31,1000,1.0,10)
        self.assertRaises(ValueError,Scene.random,64,1000,1.0,10)
        self.assertRaises(ValueError,Scene.random,1000,127,1.0,10)
        self.assertRaises(ValueError,Scene.random,1000,1000,1.0,0)
        self.assertRaises(ValueError,Scene.random,1000,1000,-1.0,10)

    def test_smallest_canvas(self):
        '''a 128 unit canvas still makes rects at least 1 unit on a side'''
        scene = Scene.random(128,128,0.0,50,seed=2)
        self.assertEqual(len(scene.mesh),600)
        self.assertTrue(np.all(scene.sizes >= 1))
        self.assertTrue(np.all(scene.sizes < 4))

    def test_style_out_of_table(self):
        '''a style index past the brush table is rejected'''
        def build(style):
            return Scene(1000,1000,1.0,[(10,10)],[(0.01,0.01)],[(20,20)],
                         [style])
        self.assertEqual(build(MAX_BRUSHES-1).rect(0).style_index,MAX_BRUSHES-1)
        self.assertRaises(ValueError,build,MAX_BRUSHES)
        self.assertRaises(ValueError,build,MAX_BRUSHES+100)


class SceneUpdateTestCase(TestCase):

    def setUp(self):
        self.scene = Scene.random(1000,1000,1.0,100,seed=42)

    def test_bounce_off_right_edge(self):
        '''past the right edge and heading out: velocity flips, rect comes back'''
        scene = self.scene
        entity = scene.entity(0)
        entity.position = (scene.width+1,500)
        entity.velocity = (0.01,0)
        scene.update()
        self.assertEqual(entity.velocity[0],-np.float32(0.01))
        self.assertTrue(entity.position[0] < scene.width+1)
        self.assertAlmostEqual(float(entity.position[0]),scene.width+1-0.5,places=3)

    def test_bounce_off_top_edge(self):
        scene = self.scene
        entity = scene.entity(3)
        entity.position = (500,-0.5)
        entity.velocity = (0,-0.02)
        scene.update()
        self.assertTrue(entity.velocity[1] > 0)
        self.assertTrue(entity.position[1] > -0.5)

    def test_no_bounce_when_heading_back(self):
        '''out of bounds but already moving inward keeps its velocity'''
        scene = self.scene
        entity = scene.entity(1)
        entity.position = (scene.width+1,500)
        entity.velocity = (-0.01,0.01)
        scene.update()
        self.assertEqual(entity.velocity[0],-np.float32(0.01))
        self.assertEqual(entity.velocity[1],np.float32(0.01))

    def test_update_moves_mesh_not_topology(self):
        '''update rewrites point values only'''
        scene = self.scene
        mesh = scene.mesh
        points = mesh.points.copy()
        indices = mesh.indices.copy()
        style_refs = mesh.style_refs.copy()
        scene.update()
        self.assertEqual(len(mesh.points),len(points))
        self.assertFalse(np.all(mesh.points == points))
        self.assertTrue(np.all(mesh.indices == indices))
        self.assertTrue(np.all(mesh.style_refs == style_refs))
        for i in (0,42,99):
            outline = scene.rect(i).outline(scene.positions[i],scene.stroke)
            self.assertTrue(np.allclose(mesh.points[12*i:12*i+12],outline))

    def test_update_reuses_buffers(self):
        '''frames after the first write into the same arrays'''
        scene = self.scene
        buffers = (scene.positions,scene.velocities,scene._gathered,
                   scene._step,scene._outward,scene._past,scene._heading)
        points = scene.mesh.points
        entity = scene.entity(5)
        entity.position = (-1,scene.height+1)
        entity.velocity = (-0.01,0.01)
        for _ in range(10):
            scene.update()
        for before, after in zip(buffers,(scene.positions,scene.velocities,
                scene._gathered,scene._step,scene._outward,scene._past,
                scene._heading)):
            self.assertTrue(before is after)
        self.assertTrue(np.shares_memory(points,scene.mesh.points))
        self.assertTrue(entity.velocity[0] > 0)
        self.assertTrue(entity.velocity[1] < 0)
        for i in (0,5,99):
            outline = scene.rect(i).outline(scene.positions[i],scene.stroke)
            self.assertTrue(np.allclose(scene.mesh.points[12*i:12*i+12],outline))

    def test_position_setter_refreshes_outline(self):
        scene = self.scene
        entity = scene.entity(7)
        entity.position = (10,20)
        self.assertTrue(np.all(entity.outline[0] == np.array((10,20),dtype=np.float32)))

    def test_size_is_read_only(self):
        entity = self.scene.entity(0)
        def set_size():
            entity.size = (1,1)
        self.assertRaises(AttributeError,set_size)
        self.assertRaises(IndexError,self.scene.entity,100)

    def test_long_run_stays_in_bounds(self):
        '''overshoot is never more than one frame of travel'''
        scene = self.scene
        step = float(np.abs(scene.velocities).max())*TIME_STEP + 1e-3
        for _ in range(1000):
            scene.update()
        self.assertTrue(np.all(scene.positions[:,0] >= -step))
        self.assertTrue(np.all(scene.positions[:,0] <= scene.width+step))
        self.assertTrue(np.all(scene.positions[:,1] >= -step))
        self.assertTrue(np.all(scene.positions[:,1] <= scene.height+step))
        self.assertTrue(scene.mesh.check())


class CountChangeTestCase(TestCase):

    def setUp(self):
        self.scene = Scene.random(1000,1000,1.0,100,seed=7)

    def test_request_does_not_resize(self):
        '''a request only records the new count'''
        scene = self.scene
        points = scene.mesh.points
        scene.request_count_change(150)
        scene.update()
        self.assertEqual(scene.new_count,150)
        self.assertEqual(scene.count,100)
        self.assertEqual(len(scene.mesh),1200)
        self.assertTrue(np.shares_memory(points,scene.mesh.points))

    def test_grow(self):
        '''growing appends new rects after the existing ones'''
        scene = self.scene
        first = scene.mesh.points[:1200].copy()
        scene.request_count_change(150)
        self.assertTrue(scene.apply_count_change())
        self.assertEqual(scene.count,150)
        self.assertEqual(scene.generation,1)
        self.assertEqual(len(scene.mesh.points),1800)
        self.assertEqual(len(scene.mesh.indices),4500)
        self.assertTrue(np.all(scene.mesh.points[:1200] == first))
        self.assertEqual(scene.styles[100],100 % MAX_BRUSHES)
        self.assertTrue(scene.mesh.check())
        scene.update()
        i = 149
        outline = scene.rect(i).outline(scene.positions[i],scene.stroke)
        self.assertTrue(np.allclose(scene.mesh.points[12*i:],outline))

    def test_shrink(self):
        '''shrinking drops rects from the end'''
        scene = self.scene
        positions = scene.positions[:40].copy()
        scene.request_count_change(40)
        self.assertTrue(scene.apply_count_change())
        self.assertEqual(len(scene.mesh.points),480)
        self.assertEqual(len(scene.mesh.indices),1200)
        self.assertTrue(np.all(scene.positions == positions))
        self.assertTrue(scene.mesh.check())
        scene.update()

    def test_nothing_to_apply(self):
        self.assertFalse(self.scene.apply_count_change())
        self.assertEqual(self.scene.generation,0)

    def test_invalid_request(self):
        self.assertRaises(ValueError,self.scene.request_count_change,0)
        self.assertEqual(self.scene.new_count,100)

def suite():
    tests = ['test_bounce_off_right_edge',
             'test_bounce_off_top_edge',
             'test_no_bounce_when_heading_back',
             'test_update_moves_mesh_not_topology',
             'test_position_setter_refreshes_outline',
             'test_size_is_read_only',
             'test_long_run_stays_in_bounds']
    return TestSuite(map(SceneUpdateTestCase, tests))

if __name__=='__main__':
  TextTestRunner(verbosity=2).run(suite())
