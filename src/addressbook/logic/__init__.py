"""Line-command layer: parsing user input into commands and running them."""
