"""
Unit tests for configuration, map loading and state output
"""

import os
import tempfile
import textwrap
import unittest
from landmark_pf.core import Landmark, Particle
from landmark_pf.utils import (load_config, get_particle_filter_params, get_init_params,
                               get_motion_params, get_sensor_params, get_simulation_params,
                               Config, load_map, save_map, write_particles, read_particles)


CONFIG_TEXT = textwrap.dedent("""
    random_seed: 3
    particle_filter:
      num_particles: 50
    noise:
      initial: [0.3, 0.3, 0.01]
      motion: [0.2, 0.2, 0.02]
      landmark: [0.3, 0.4]
      observation: [0.1, 0.1]
    sensor:
      range: 40.0
    simulation:
      initial_x: 1.0
      initial_y: 2.0
      initial_theta: 0.5
      delta_t: 0.1
      velocity: 5.0
      yaw_rate: 0.0
      steps: 10
""")


class TempDirTestCase(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def write_file(self, name, text):
        path = os.path.join(self.tmp, name)
        with open(path, 'w') as f:
            f.write(text)
        return path


class TestConfig(TempDirTestCase):

    def test_dot_access_and_round_trip(self):
        cfg = Config({'a': {'b': 1}, 'c': 2})
        self.assertEqual(cfg.a.b, 1)
        self.assertEqual(cfg.to_dict(), {'a': {'b': 1}, 'c': 2})
        self.assertIsNone(cfg.get('missing'))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(os.path.join(self.tmp, 'nope.yaml'))

    def test_missing_section(self):
        path = self.write_file('bad.yaml', "particle_filter:\n  num_particles: 5\n")
        with self.assertRaises(ValueError):
            load_config(path)

    def test_parameter_extraction(self):
        config = load_config(self.write_file('config.yaml', CONFIG_TEXT))

        pf = get_particle_filter_params(config)
        self.assertEqual(pf, {'num_particles': 50, 'seed': 3, 'n_workers': 1, 'verbose': False})

        init = get_init_params(config)
        self.assertEqual((init['x'], init['y'], init['theta']), (1.0, 2.0, 0.5))
        self.assertEqual(init['std'], [0.3, 0.3, 0.01])

        motion = get_motion_params(config)
        self.assertEqual(motion['std_pos'], [0.2, 0.2, 0.02])
        self.assertEqual(motion['velocity'], 5.0)

        sensor = get_sensor_params(config)
        self.assertEqual(sensor, {'sensor_range': 40.0, 'std_landmark': [0.3, 0.4]})

        sim = get_simulation_params(config)
        self.assertEqual(sim['std_observation'], [0.1, 0.1])

    def test_rejects_zero_particles(self):
        config = load_config(self.write_file(
            'config.yaml', CONFIG_TEXT.replace("num_particles: 50", "num_particles: 0")))
        with self.assertRaises(ValueError):
            get_particle_filter_params(config)

    def test_rejects_non_positive_landmark_noise(self):
        config = load_config(self.write_file(
            'config.yaml', CONFIG_TEXT.replace("landmark: [0.3, 0.4]", "landmark: [0.0, 0.4]")))
        with self.assertRaises(ValueError):
            get_sensor_params(config)


class TestMapLoader(TempDirTestCase):

    def test_parses_landmarks(self):
        path = self.write_file('map.txt', "# x y id\n92.064 -34.777 1\n\n61.109 -47.132 2\n")
        self.assertEqual(load_map(path), [Landmark(1, 92.064, -34.777), Landmark(2, 61.109, -47.132)])

    def test_malformed_line(self):
        path = self.write_file('map.txt', "1.0 2.0 1\n1.0 oops 2\n")
        with self.assertRaises(ValueError) as ctx:
            load_map(path)
        self.assertIn(':2:', str(ctx.exception))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_map(os.path.join(self.tmp, 'missing.txt'))

    def test_save_then_load(self):
        landmarks = [Landmark(4, 1.5, -2.0), Landmark(9, 0.0, 3.25)]
        path = os.path.join(self.tmp, 'map.txt')
        save_map(path, landmarks)
        self.assertEqual(load_map(path), landmarks)


class TestStateOutput(TempDirTestCase):

    def test_line_per_particle(self):
        path = os.path.join(self.tmp, 'state.txt')
        write_particles(path, [Particle(0, 1.0, 2.0, 0.5), Particle(1, -1.0, 0.0, 3.0)])
        with open(path) as f:
            lines = f.read().splitlines()
        self.assertEqual(lines, ["1.0 2.0 0.5", "-1.0 0.0 3.0"])
        self.assertEqual(read_particles(path), [(1.0, 2.0, 0.5), (-1.0, 0.0, 3.0)])


if __name__ == '__main__':
    unittest.main()
