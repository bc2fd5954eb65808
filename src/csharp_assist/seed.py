"""Sample C# source shown to a new session."""

SAMPLE_CODE = """using System;
using System.Collections.Generic;

namespace TaskPlanner
{
    public class Planner
    {
        private readonly List<string> _tasks = new();

        public void AddTask(string description)
        {
            if (string.IsNullOrWhiteSpace(description))
            {
                throw new ArgumentException("Description cannot be empty.", nameof(description));
            }

            _tasks.Add(description);
        }

        public void Print()
        {
            foreach (var task in _tasks)
            {
                Console.WriteLine(task);
            }
        }
    }
}
"""

__all__ = ["SAMPLE_CODE"]
